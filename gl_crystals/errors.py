"""
Error Types

Defects (broken preconditions) and user-input errors are kept apart: a defect
aborts the whole computation, a ParseError is reported back to whoever typed
the expression. Expected "no match" outcomes are never exceptions.
"""

from typing import Optional


class CrystalError(Exception):
    """Base class for all errors raised by gl_crystals."""


class PreconditionViolation(CrystalError, AssertionError):
    """A caller broke a precondition of a core routine (programming error)."""


class ParseError(CrystalError):
    """
    An expression could not be tokenized or evaluated.

    Attributes:
        pos: Offset of the offending span in the input
        extent: Length of the offending span
        msg: Human readable description
    """

    def __init__(self, pos: int, extent: int, msg: str):
        super().__init__(msg)
        self.pos = pos
        self.extent = extent
        self.msg = msg

    def __repr__(self) -> str:
        return f"ParseError(pos={self.pos}, extent={self.extent}, msg={self.msg!r})"


def assert_or_crash(cond: bool, msg: Optional[str] = None) -> None:
    """Raise PreconditionViolation unless ``cond`` holds."""
    if not cond:
        message = "Assertion failed" + ("." if msg is None else f": {msg}")
        raise PreconditionViolation(message)
