"""Helpers for combining and comparing puzzle values."""


def intersect_all(collections):
    """Return the items found in every one of the given collections, sorted
    and without duplicates.
    """
    collections = iter(collections)
    try:
        first = next(collections)
    except StopIteration:
        raise ValueError(
            "Can't intersect an empty family of collections") from None

    remaining = set(first)
    for collection in collections:
        remaining.intersection_update(collection)

    return sorted(remaining)


def abs_diff(a, b):
    """Distance between two values, without going through negative numbers
    on the way.
    """
    return max(a, b) - min(a, b)
