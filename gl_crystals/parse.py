"""
Expression Parser

Turns text such as ``2[2, 1] * ([1] + 3)^2`` into a linear combination.
Tokens are converted to reverse Polish notation with a shunting-yard pass,
then evaluated on a stack of linear combinations.
"""

import re
from typing import List, NamedTuple, Union

from .algebra import (
    AlgebraType,
    Linear,
    algebra_add,
    algebra_mul,
    algebra_part,
    algebra_pow,
    algebra_unit,
)
from .constants import IMPLICIT_PRODUCT, OPERATOR_PRECEDENCE
from .errors import ParseError
from .partition import Partition, is_partition

TOKEN_RE = re.compile(r"\s+|\d+|[+*^()]|\[\s*\]|\[\s*\d+\s*(?:,\s*\d+\s*)*\]")
DIGITS_RE = re.compile(r"\d+")


class Item(NamedTuple):
    """An RPN entry: an integer, a partition or an operator, with its offset."""
    item: Union[int, Partition, str]
    pos: int


class _Op(NamedTuple):
    tok: str
    pos: int


def extract_nums(text: str) -> Partition:
    """Extract all contiguous runs of digits as integers."""
    return tuple(int(s) for s in DIGITS_RE.findall(text))


def to_rpn(text: str) -> List[Item]:
    """
    Tokenize ``text`` and reorder it into reverse Polish notation.

    A partition written directly after a number (``2[3, 1]``), with no
    whitespace between them, is multiplied by it.

    Raises:
        ParseError: On unrecognised input, a bracketed list that is not a
            partition, or unbalanced parentheses
    """
    op_stack: List[_Op] = []
    out_queue: List[Item] = []

    def push_operator(tok: str, pos: int) -> None:
        while op_stack and OPERATOR_PRECEDENCE.get(op_stack[-1].tok, -1) >= OPERATOR_PRECEDENCE[tok]:
            out_queue.append(Item(*op_stack.pop()))
        op_stack.append(_Op(tok, pos))

    last_token = ""
    next_index = 0
    for match in TOKEN_RE.finditer(text):
        token = match.group(0)
        pos = match.start()

        if pos != next_index:
            raise ParseError(next_index, pos - next_index,
                             f'Unrecognised token "{text[next_index:pos]}"')
        next_index = match.end()

        if token.isspace():
            last_token = token
            continue

        if token[0] == "[":
            nums = extract_nums(token)
            if not is_partition(nums):
                raise ParseError(pos, len(token),
                                 "Partitions are weakly decreasing sequences of positive "
                                 f"integers: {token} is not a partition.")
            if DIGITS_RE.search(last_token):
                push_operator(IMPLICIT_PRODUCT, pos)
            out_queue.append(Item(nums, pos))
        elif token.isdigit():
            out_queue.append(Item(int(token), pos))
        elif token == "(":
            op_stack.append(_Op(token, pos))
        elif token == ")":
            while op_stack and op_stack[-1].tok != "(":
                out_queue.append(Item(*op_stack.pop()))
            if not op_stack:
                raise ParseError(pos, 1, "Unmatched closing parenthesis")
            op_stack.pop()
        else:
            push_operator(token, pos)

        last_token = token

    if next_index != len(text):
        raise ParseError(next_index, len(text) - next_index, "Unrecognised token.")

    while op_stack:
        op = op_stack.pop()
        if op.tok == "(":
            raise ParseError(op.pos, 1, "Unmatched opening parenthesis.")
        out_queue.append(Item(*op))

    return out_queue


def evaluate(algebra_type: AlgebraType, text: str) -> Linear:
    """
    Evaluate an expression in the given algebra.

    Partition literals with too many rows for GL(n) evaluate to 0.

    Raises:
        ParseError: If the text does not parse or an operator is misused
    """
    stack: List[Linear] = []
    for item, pos in to_rpn(text):
        if isinstance(item, int):
            stack.append(algebra_unit(item))
        elif isinstance(item, tuple):
            stack.append(algebra_type.restrict(algebra_part(item)))
        else:
            if len(stack) < 2:
                raise ParseError(pos, 1, f"Not enough arguments to {item}")
            right = stack.pop()
            left = stack.pop()
            if item == "+":
                stack.append(algebra_add(left, right))
            elif item == "*":
                stack.append(algebra_mul(algebra_type, left, right))
            else:
                if len(right) != 1 or right[0].part:
                    raise ParseError(pos, 1, f"Exponent must be a number in {item}")
                stack.append(algebra_pow(algebra_type, left, right[0].mult))

    if len(stack) != 1:
        raise ParseError(0, len(text), "Missing operations")
    return stack[0]


def frame_error(err: ParseError, text: str, marker: str = "^") -> str:
    """Return ``text`` with the span of ``err`` underlined on the next line."""
    return text + "\n" + " " * err.pos + marker * max(err.extent, 1)
