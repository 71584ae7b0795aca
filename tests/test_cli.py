"""
Tests for the command line front end
"""

import io

import pytest

from gl_crystals.algebra import AlgebraType, algebra_part
from gl_crystals.cli import build_parser, format_table, main


def run(*argv):
    out, err = io.StringIO(), io.StringIO()
    status = main(list(argv), out=out, err=err)
    return status, out.getvalue(), err.getvalue()


class TestMain:
    def test_gl_product(self):
        status, out, _ = run("[1] * [1]", "--gl", "2")
        assert status == 0
        assert out == "[2] + [1, 1]\n"

    def test_symmetric(self):
        status, out, _ = run("[1]^2", "--sym")
        assert status == 0
        assert out.strip() == "[2] + [1, 1]"

    def test_rank_is_clamped(self):
        status, out, _ = run("[1, 1, 1]", "--gl", "1")
        assert status == 0
        assert out.strip() == "0"

    def test_table(self):
        status, out, _ = run("[2, 1] * [1]", "--gl", "3", "--table")
        lines = out.splitlines()
        assert lines[0] == "[3, 1] + [2, 2] + [2, 1, 1]"
        assert lines[1].split() == ["Partition", "Multiplicity", "Dimension"]
        assert lines[2].split() == ["[3,", "1]", "1", "15"]
        assert len(lines) == 5

    def test_parse_error(self):
        status, out, err = run("1 +", "--sym")
        assert status == 1
        assert out.strip() == "0"
        assert "Not enough arguments to +" in err
        assert "1 +\n  ^" in err



class TestHelpers:
    def test_format_table(self):
        table = format_table(AlgebraType.gl(3), algebra_part([2, 1]))
        assert table.splitlines()[1].split() == ["[2,", "1]", "1", "8"]
        assert format_table.__doc__

    def test_build_parser(self):
        args = build_parser().parse_args(["[1]", "--sym"])
        assert args.sym and args.expression == "[1]"
        assert build_parser.__doc__


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
