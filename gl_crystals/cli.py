"""
Command line front end.

    gl-crystals "[2, 1] * [2, 1]" --gl 3 --table
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .algebra import SYM, AlgebraType, Linear, algebra_string, algebra_unit
from .constants import DEFAULT_GL_RANK, MIN_GL_RANK
from .errors import ParseError
from .parse import evaluate, frame_error
from .partition import format_partition

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the gl-crystals command."""
    p = argparse.ArgumentParser(
        prog="gl-crystals",
        description="Decompose products of GL(n) or symmetric group irreducibles.",
    )
    p.add_argument("expression", help='Expression such as "2[2, 1] * [1]^2 + 3"')
    group = p.add_mutually_exclusive_group()
    group.add_argument("--gl", type=int, default=DEFAULT_GL_RANK, metavar="N",
                       help=f"Work in the representation ring of GL(N) (default {DEFAULT_GL_RANK})")
    group.add_argument("--sym", action="store_true",
                       help="Work in the representation ring of the symmetric groups")
    p.add_argument("--table", action="store_true",
                   help="Print a partition / multiplicity / dimension table")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def read_config(args: argparse.Namespace) -> AlgebraType:
    """Pick the algebra from parsed arguments, raising small ranks to the minimum."""
    if args.sym:
        return SYM
    return AlgebraType.gl(max(args.gl, MIN_GL_RANK))


def format_table(algebra_type: AlgebraType, lin: Linear) -> str:
    """
    Lay out a partition / multiplicity / dimension table.

    Args:
        algebra_type: Algebra whose dimension formula fills the last column
        lin: Normalised linear combination, one row per term

    Returns:
        Left-aligned columns separated by two spaces
    """
    rows = [("Partition", "Multiplicity", "Dimension")]
    for term in lin:
        rows.append((format_partition(term.part), str(term.mult),
                     str(algebra_type.dimension(term.part))))

    widths = [max(len(row[k]) for row in rows) for k in range(3)]
    return "\n".join("  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip()
                     for row in rows)


def main(argv: Optional[List[str]] = None, out: TextIO = sys.stdout,
         err: TextIO = sys.stderr) -> int:
    """Run the command line; returns the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    algebra_type = read_config(args)
    logger.debug("Evaluating %r in %s", args.expression, algebra_type)

    status = 0
    try:
        lin = evaluate(algebra_type, args.expression)
    except ParseError as e:
        print(f"error: {e.msg}", file=err)
        print(frame_error(e, args.expression), file=err)
        lin = algebra_unit(0)
        status = 1

    print(algebra_string(lin), file=out)
    if args.table:
        print(format_table(algebra_type, lin), file=out)
    return status
