"""Reading puzzle input files.

Every puzzle input is a text file; most are a list of lines, some are a grid
of characters, and some are groups of lines separated by blank lines.
"""
import logging


log = logging.getLogger(__name__)


def _iter_lines(path):
    # Only \n ends a line; a \r is dropped just when it comes right before one
    with open(path, encoding='utf8', newline='') as f:
        for line in f:
            if line.endswith('\n'):
                line = line[:-1]
                if line.endswith('\r'):
                    line = line[:-1]
            yield line


def read_lines(path):
    """Return the lines of a file, without their line endings."""
    lines = list(_iter_lines(path))
    log.debug("Read %d lines from %s", len(lines), path)
    return lines


def read_lines_of_chars(path):
    """Return a file as a grid: a list of rows, each a list of characters.

    Index it as ``grid[y][x]``.
    """
    return [list(line) for line in read_lines(path)]


def read_blocks(path):
    """Return the groups of lines in a file that are separated by blank
    lines.

    Every blank line ends the current block, so two blank lines in a row
    produce an empty block between them.  A final block is included even
    without a trailing blank line.
    """
    blocks = []
    latest_block = []
    for line in _iter_lines(path):
        if line:
            latest_block.append(line)
        else:
            blocks.append(latest_block)
            latest_block = []

    if latest_block:
        blocks.append(latest_block)

    log.debug("Read %d blocks from %s", len(blocks), path)
    return blocks


def split_block_on_whitespace(block):
    return [token for line in block for token in line.split()]


def remove_first_and_last(string):
    """Strip one character off each end, e.g. brackets or quotes."""
    return string[1:-1]
