"""
Tests for the linear combination algebra
"""

import pytest

from gl_crystals.algebra import (
    SYM,
    AlgebraType,
    Term,
    Linear,
    algebra_add,
    algebra_mul,
    algebra_part,
    algebra_pow,
    algebra_string,
    algebra_unit,
    normalise,
)
from gl_crystals.errors import PreconditionViolation


class TestEmbeddings:
    def test_units(self):
        assert algebra_unit(0) == [Term((), 0)]
        assert algebra_unit(1) == [Term((), 1)]

    def test_partitions(self):
        assert algebra_part([]) == algebra_unit(1)
        assert algebra_part([1]) == [Term((1,), 1)]

    def test_rejects_non_partition(self):
        with pytest.raises(PreconditionViolation):
            algebra_part([1, 2])


class TestNormalise:
    def test_adds(self):
        assert add_parts([], [], [2, 1], [], [1]) == [
            Term((2, 1), 1), Term((1,), 1), Term((), 3)]

    def test_cancellation(self):
        assert normalise([Term((1,), 2), Term((2,), 0), Term((1,), -2)]) == []

    def test_idempotent(self):
        lin = normalise([Term((1,), 1), Term((3,), 2), Term((), 4), Term((1,), 5)])
        assert normalise(lin) == lin
        assert lin == [Term((3,), 2), Term((1,), 6), Term((), 4)]

    def test_add_is_commutative(self):
        a = add_parts([2], [1, 1])
        b = algebra_add(algebra_unit(3), algebra_part([2]))
        assert algebra_add(a, b) == algebra_add(b, a)


class TestAlgebraType:
    def test_gl_minimum_rank(self):
        with pytest.raises(PreconditionViolation):
            AlgebraType.gl(1)

    def test_restrict(self):
        gl2 = AlgebraType.gl(2)
        assert gl2.restrict(algebra_part([3, 2, 1])) == algebra_unit(0)
        assert gl2.restrict(algebra_part([2, 1])) == algebra_part([2, 1])
        assert SYM.restrict(algebra_part([3, 2, 1])) == algebra_part([3, 2, 1])

    def test_tensor_in(self):
        assert AlgebraType.gl(4).tensor_in([1], [1]) == 4
        assert SYM.tensor_in([2, 1], [1, 1]) == 4

    def test_dimension(self):
        assert AlgebraType.gl(3).dimension([2, 1]) == 8
        assert SYM.dimension([2, 1]) == 2

    def test_str(self):
        assert str(AlgebraType.gl(3)) == "GL(3)"
        assert str(SYM) == "Sym"


class TestMultiplication:
    def test_respects_units(self):
        assert algebra_mul(SYM, algebra_unit(2), algebra_part([2, 2])) == add_parts([2, 2], [2, 2])
        assert algebra_mul(SYM, algebra_part([2, 2]), algebra_unit(2)) == add_parts([2, 2], [2, 2])

    def test_empty_product(self):
        assert algebra_mul(SYM) == algebra_unit(1)
        assert algebra_pow(SYM, algebra_part([1]), 0) == algebra_unit(1)

    def test_symmetric(self):
        one = algebra_part([1])
        assert algebra_mul(SYM, one, one) == add_parts([1, 1], [2])
        assert algebra_mul(SYM, one, one, one) == add_parts([1, 1, 1], [2, 1], [2, 1], [3])
        assert algebra_pow(SYM, one, 3) == add_parts([1, 1, 1], [2, 1], [2, 1], [3])

        square = add_parts(
            [2, 2, 1, 1],
            [2, 2, 2],
            [3, 1, 1, 1],
            [3, 2, 1], [3, 2, 1],
            [3, 3],
            [4, 1, 1],
            [4, 2])
        assert algebra_mul(SYM, algebra_part([2, 1]), algebra_part([2, 1])) == square
        assert algebra_pow(SYM, algebra_part([2, 1]), 2) == square

    def test_gl2(self):
        gl2 = AlgebraType.gl(2)
        one = algebra_part([1])
        assert algebra_mul(gl2, one, one) == add_parts([1, 1], [2])
        assert algebra_mul(gl2, one, one, one) == add_parts([2, 1], [2, 1], [3])
        assert algebra_pow(gl2, one, 3) == add_parts([2, 1], [2, 1], [3])
        assert algebra_pow(gl2, algebra_part([2, 1]), 2) == add_parts([3, 3], [4, 2])

    def test_gl3(self):
        gl3 = AlgebraType.gl(3)
        one = algebra_part([1])
        assert algebra_pow(gl3, one, 3) == add_parts([1, 1, 1], [2, 1], [2, 1], [3])

        square = add_parts(
            [2, 2, 2],
            [3, 2, 1], [3, 2, 1],
            [3, 3],
            [4, 1, 1],
            [4, 2])
        assert algebra_mul(gl3, algebra_part([2, 1]), algebra_part([2, 1])) == square
        assert algebra_pow(gl3, algebra_part([2, 1]), 2) == square

    def test_distributes(self):
        gl3 = AlgebraType.gl(3)
        lin = algebra_add(algebra_part([1]), algebra_unit(2))
        assert algebra_mul(gl3, lin, lin) == add_parts([2], [1, 1], [1], [1], [1], [1], [], [], [], [])


class TestString:
    def test_render(self):
        assert algebra_string(add_parts([], [], [2, 1], [], [1])) == "[2, 1] + [1] + 3"
        assert algebra_string(add_parts([2, 1], [2, 1])) == "2[2, 1]"

    def test_zero(self):
        assert algebra_string([]) == "0"
        assert algebra_string(algebra_unit(0)) == "0"


def add_parts(*parts) -> Linear:
    """Sum of single partitions, one term per argument."""
    return algebra_add(*(algebra_part(p) for p in parts))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
