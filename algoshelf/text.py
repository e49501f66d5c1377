"""Small string utilities and infix-to-postfix conversion."""

from __future__ import annotations

__all__ = ["concatenate", "count_digits", "swap_letter_case", "infix_to_postfix"]

_PRECEDENCE = {"+": 2, "-": 2, "*": 3, "/": 3}


def concatenate(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def count_digits(text: str) -> int:
    """Count the ASCII digits 0-9 in ``text``."""
    return sum(1 for char in text if "0" <= char <= "9")


def swap_letter_case(char: str) -> str:
    """Swap the case of a single ASCII letter.

    Raises ValueError for anything other than one ASCII letter.
    """
    if len(char) != 1:
        raise ValueError("expected a single character")
    if "A" <= char <= "Z":
        return chr(ord(char) + 32)
    if "a" <= char <= "z":
        return chr(ord(char) - 32)
    raise ValueError(f"{char!r} is not an ASCII letter")


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression over + - * / to postfix.

    Every other non-space character is an operand; whitespace is dropped.
    Operators of equal precedence associate to the left.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char.isspace():
            continue
        precedence = _PRECEDENCE.get(char)
        if precedence is None:
            output.append(char)
            continue
        while stack and _PRECEDENCE[stack[-1]] >= precedence:
            output.append(stack.pop())
        stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)