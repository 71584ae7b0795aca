"""
Linear Combination Algebra

Formal Z-linear combinations of partitions, i.e. elements of the
representation ring of GL(n) or of the symmetric groups. The empty partition
is the unit, so integers embed as multiples of it.

A combination is a list of Terms; the normal form is sorted in decreasing
partition order with no repeated partitions and no zero multiplicities.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

from .constants import MIN_GL_RANK, TERM_SEPARATOR, ZERO_STRING
from .errors import assert_or_crash
from .partition import Partition, format_partition, is_partition, partition_key
from .tensor import dimension_in_gl, dimension_symmetric, tensor_partitions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Term:
    """A partition with an integer multiplicity."""
    part: Partition
    mult: int


Linear = List[Term]


def algebra_unit(num: int) -> Linear:
    """The unit inclusion Z -> algebra."""
    return [Term((), num)]


def algebra_part(part: Sequence[int]) -> Linear:
    """Place a single partition into the algebra."""
    assert_or_crash(is_partition(part), f"{list(part)} is not a partition")
    return [Term(tuple(part), 1)]


def normalise(lin: Sequence[Term]) -> Linear:
    """Sort, merge repeated partitions and drop zero multiplicities."""
    result: Linear = []
    for term in sorted(lin, key=lambda t: partition_key(t.part), reverse=True):
        if term.mult == 0:
            continue
        if not result or result[-1].part != term.part:
            result.append(term)
            continue

        new_mult = result[-1].mult + term.mult
        if new_mult == 0:
            result.pop()
        else:
            result[-1] = Term(term.part, new_mult)
    return result


def algebra_add(*lins: Sequence[Term]) -> Linear:
    """Addition of linear combinations."""
    return normalise([term for lin in lins for term in lin])


@dataclass(frozen=True)
class AlgebraType:
    """
    Which representation ring products are taken in.

    Attributes:
        algebra: "gl" or "sym"
        n: Rank for GL(n); unused for the symmetric groups
    """
    algebra: str
    n: int = 0

    @classmethod
    def gl(cls, n: int) -> "AlgebraType":
        assert_or_crash(n >= MIN_GL_RANK, f"GL({n}) is below the minimum rank {MIN_GL_RANK}")
        return cls("gl", n)

    @classmethod
    def sym(cls) -> "AlgebraType":
        return cls("sym", 0)

    @property
    def is_gl(self) -> bool:
        return self.algebra == "gl"

    def restrict(self, lin: Linear) -> Linear:
        """Drop partitions that have no GL(n) representation (more than n rows)."""
        if not self.is_gl:
            return lin
        restricted = [term for term in lin if len(term.part) <= self.n]
        return restricted if restricted else algebra_unit(0)

    def tensor_in(self, part1: Sequence[int], part2: Sequence[int]) -> int:
        """Rank of the GL_n in which two partitions should be tensored."""
        return self.n if self.is_gl else len(part1) + len(part2)

    def dimension(self, part: Sequence[int]) -> int:
        """Dimension of the irreducible labelled by ``part``."""
        if self.is_gl:
            return dimension_in_gl(self.n, part)
        return dimension_symmetric(part)

    def __str__(self) -> str:
        return f"GL({self.n})" if self.is_gl else "Sym"


SYM = AlgebraType.sym()


def algebra_mul(algebra_type: AlgebraType, *lins: Sequence[Term]) -> Linear:
    """Multiplication of linear combinations in the given algebra."""
    if not lins:
        return algebra_unit(1)

    so_far = list(lins[0])
    for lin in lins[1:]:
        product: Linear = []
        for left in so_far:
            for right in lin:
                mult = left.mult * right.mult
                if not left.part:
                    product.append(Term(right.part, mult))
                    continue
                if not right.part:
                    product.append(Term(left.part, mult))
                    continue
                n = algebra_type.tensor_in(left.part, right.part)
                for part in tensor_partitions(n, left.part, right.part):
                    product.append(Term(part, mult))

        so_far = normalise(product)
        logger.debug("Product in %s has %d terms", algebra_type, len(so_far))

    return so_far


def algebra_pow(algebra_type: AlgebraType, lin: Sequence[Term], power: int) -> Linear:
    """Exponentiation of a linear combination; power 0 gives the unit."""
    assert_or_crash(power >= 0, f"negative exponent {power}")
    if power == 0:
        return algebra_unit(1)
    return algebra_mul(algebra_type, *([lin] * power))


def algebra_string(lin: Sequence[Term]) -> str:
    """Render a linear combination, e.g. ``2[2, 1] + [1] + 3``."""
    output: List[str] = []
    for term in lin:
        mult_str = str(term.mult)
        if not term.part:
            output.append(mult_str)
            continue
        if mult_str == "1":
            mult_str = ""
        output.append(mult_str + format_partition(term.part))

    if not output:
        return ZERO_STRING
    return TERM_SEPARATOR.join(output)
