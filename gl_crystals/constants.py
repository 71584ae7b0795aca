# gl_crystals/constants.py
"""
GL Crystals Constants

This module defines constants used throughout the crystal system:

LAYER 1: Representation Constants
- MIN_GL_RANK: Smallest n for which GL(n) products are computed
- DEFAULT_GL_RANK: Rank used by the command line when none is given

LAYER 2: Expression Constants
- OPERATOR_PRECEDENCE: Binding strength of the infix operators
- IMPLICIT_PRODUCT: Operator inserted for ``2[3, 1]`` style input

LAYER 3: Rendering Constants
- ZERO_STRING: Rendering of the empty linear combination
- TERM_SEPARATOR: Joiner between rendered terms
"""


# =============================================================================
# LAYER 1: Representation Constants
# =============================================================================

MIN_GL_RANK = 2
DEFAULT_GL_RANK = 3

# Letters of a vertex start at 1; row i of a partition is written with letter i + 1
FIRST_LETTER = 1

assert 2 <= MIN_GL_RANK <= DEFAULT_GL_RANK, "GL ranks must satisfy 2 ≤ MIN ≤ DEFAULT"


# =============================================================================
# LAYER 2: Expression Constants
# =============================================================================

# Higher binds tighter; all operators are left associative
OPERATOR_PRECEDENCE = {"+": 0, "*": 1, "^": 2}
IMPLICIT_PRODUCT = "*"

assert IMPLICIT_PRODUCT in OPERATOR_PRECEDENCE


# =============================================================================
# LAYER 3: Rendering Constants
# =============================================================================

ZERO_STRING = "0"
TERM_SEPARATOR = " + "
