"""
GL Crystals - Tensor Product Decompositions via Crystal Bases

Decomposes tensor products of irreducible representations of GL(n) and of
the symmetric groups by walking crystal graphs, without ever storing the
crystal itself.
"""

__version__ = "0.1.0"

from .errors import CrystalError, ParseError, PreconditionViolation
from .partition import is_partition, partition_to_hw, vertex_height
from .lattice import extend, hw_to_partition, is_lattice_word
from .edge import Edge, crystal_f, edge_target
from .traversal import Crystal, expand_in_gl, traverse, walk_crystal
from .tensor import dimension_in_gl, dimension_symmetric, tensor_partitions
from .algebra import (
    SYM,
    AlgebraType,
    Term,
    algebra_add,
    algebra_mul,
    algebra_part,
    algebra_pow,
    algebra_string,
    algebra_unit,
    normalise,
)
from .parse import evaluate, to_rpn

__all__ = [
    "CrystalError",
    "ParseError",
    "PreconditionViolation",
    "is_partition",
    "partition_to_hw",
    "vertex_height",
    "extend",
    "hw_to_partition",
    "is_lattice_word",
    "Edge",
    "crystal_f",
    "edge_target",
    "Crystal",
    "expand_in_gl",
    "traverse",
    "walk_crystal",
    "dimension_in_gl",
    "dimension_symmetric",
    "tensor_partitions",
    "SYM",
    "AlgebraType",
    "Term",
    "algebra_add",
    "algebra_mul",
    "algebra_part",
    "algebra_pow",
    "algebra_string",
    "algebra_unit",
    "normalise",
    "evaluate",
    "to_rpn",
]
