"""Plumbing shared by every puzzle program.

A puzzle program ("solver") is anything that can turn an input file into a
pair of answers, one per part of the puzzle.  Usually that's a module:

    import zope.interface as zi

    from aocutil.harness import ISolver

    zi.moduleProvides(ISolver)

    def get_program_output(path):
        ...
        return part_1, part_2

Each solver keeps its real puzzle input in a file called ``input`` next to
its source, and the worked example from the puzzle text in ``testinput``.
Run the former with ``aoc path/to/solver.py``; check the latter from a
test with `check_example`.
"""
import argparse
import importlib.util
import logging
import os.path
import sys

import zope.interface as zi
from zope.interface.exceptions import Invalid
from zope.interface.verify import verifyObject


log = logging.getLogger(__name__)

INPUT_FILENAME = 'input'
TEST_INPUT_FILENAME = 'testinput'


class ISolver(zi.Interface):
    """Something that solves both parts of a puzzle."""

    def get_program_output(path):
        """Read the puzzle input at `path` and return a 2-tuple of the answers
        to part 1 and part 2.
        """


def _verify_solver(solver):
    if not ISolver.providedBy(solver):
        raise TypeError("{!r} does not provide ISolver".format(solver))

    try:
        verifyObject(ISolver, solver)
    except Invalid as e:
        raise TypeError("{!r} is not a usable solver: {}".format(solver, e))


def load_solver(path):
    """Import a solver module from its source file."""
    name = os.path.splitext(os.path.basename(path))[0]
    spec = importlib.util.spec_from_file_location(name, path)
    if spec is None:
        raise ImportError("Can't load a solver from {!r}".format(path))

    module = importlib.util.module_from_spec(spec)
    # Registered first, so classes defined in the solver can find their module
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    except Exception:
        del sys.modules[name]
        raise
    log.debug("Loaded solver %r from %s", name, path)
    return module


def input_path(solver, name=INPUT_FILENAME):
    """Return the path to the input file called `name` that lives alongside
    the solver's source code.
    """
    module = solver
    if not hasattr(module, '__file__'):
        module = sys.modules[type(solver).__module__]

    return os.path.join(os.path.dirname(os.path.abspath(module.__file__)), name)


def run(solver, path):
    """Run the solver against the input file at `path` and return both
    answers.
    """
    _verify_solver(solver)

    log.debug("Solving %s with %r", path, solver)
    part_1, part_2 = solver.get_program_output(path)
    log.info("Part 1 output: %s", part_1)
    log.info("Part 2 output: %s", part_2)
    return part_1, part_2


def check(solver, path, part_1, part_2):
    """Run the solver and fail loudly if either answer isn't the expected one.
    """
    actual_1, actual_2 = run(solver, path)
    assert actual_1 == part_1, (
        "Part 1: expected {!r}, got {!r}".format(part_1, actual_1))
    assert actual_2 == part_2, (
        "Part 2: expected {!r}, got {!r}".format(part_2, actual_2))


def check_example(solver, part_1, part_2):
    """Check the solver's answers for its ``testinput`` file."""
    check(solver, input_path(solver, TEST_INPUT_FILENAME), part_1, part_2)


class StderrHandler(logging.Handler):
    """Writes to whatever `sys.stderr` is at the time, rather than whatever it
    was when the handler was created.
    """
    def emit(self, record):
        msg = self.format(record)
        print(msg, file=sys.stderr)


def _configure_logging(level):
    # Everything under the aocutil namespace goes to stderr, so stdout only
    # ever has the answers on it
    aocutil_logger = logging.getLogger('aocutil')
    if not aocutil_logger.handlers:
        handler = StderrHandler()
        handler.setFormatter(
            logging.Formatter('%(levelname)s %(name)s: %(message)s'))
        aocutil_logger.addHandler(handler)
    aocutil_logger.setLevel(level)
    aocutil_logger.propagate = False


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='aoc',
        description="Print the answers to both parts of a puzzle.",
    )
    parser.add_argument(
        'solver', help="path to the solver's source file, e.g. day01/main.py")
    parser.add_argument(
        'input', nargs='?', default=None,
        help="puzzle input file (default: the solver's own input file)")
    parser.add_argument(
        '-v', '--verbose', action='store_true', help="log debugging output")
    args = parser.parse_args(argv)

    _configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    solver = load_solver(args.solver)

    path = args.input
    if path is None:
        path = input_path(solver)

    try:
        part_1, part_2 = run(solver, path)
    except Exception:
        sys.stdout.flush()
        sys.stderr.flush()
        raise

    print("Part 1 output: {}".format(part_1))
    print("Part 2 output: {}".format(part_2))
