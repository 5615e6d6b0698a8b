# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

"""Byte-level scanning primitives shared by the directive and gate readers.

All functions operate on an :class:`InputCursor` and leave it positioned
right after whatever they consumed.
"""

from qasm2stim.exceptions import MalformedQubitRefError, MalformedVersionError

NEWLINE = ord("\n")
SEMICOLON = ord(";")
DOT = ord(".")
QUBIT_REGISTER = ord("q")
OPEN_BRACKET = ord("[")
CLOSE_BRACKET = ord("]")


def is_digit(byte: int | None) -> bool:
    return byte is not None and 48 <= byte <= 57


def is_space(byte: int | None) -> bool:
    return byte is not None and (9 <= byte <= 13 or byte == 32)


def is_name_char(byte: int | None) -> bool:
    return byte is not None and (
        65 <= byte <= 90 or 97 <= byte <= 122 or byte == 95
    )


def describe(byte: int | None) -> str:
    """Render the byte at fault for an error message."""
    if byte is None:
        return "end of input"
    if 33 <= byte <= 126:
        return repr(chr(byte))
    return f"ASCII({byte})"


class InputCursor:
    """Read-only position into a byte buffer, bounded by ``[start, end)``."""

    __slots__ = ("data", "pos", "end")

    def __init__(self, data: bytes, start: int = 0, end: int | None = None):
        self.data = data
        self.end = len(data) if end is None else min(end, len(data))
        self.pos = min(start, self.end)

    @property
    def at_end(self) -> bool:
        return self.pos >= self.end

    def peek(self, offset: int = 0) -> int | None:
        """Return the byte ``offset`` positions ahead, or ``None`` past the end."""
        index = self.pos + offset
        if index >= self.end:
            return None
        return self.data[index]

    def startswith(self, literal: bytes) -> bool:
        return self.data.startswith(literal, self.pos, self.end)

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, self.end)

    def take(self, start: int) -> bytes:
        """Return the bytes between ``start`` and the current position."""
        return self.data[start : self.pos]

    def __repr__(self) -> str:  # pragma: no cover
        return f"InputCursor(pos={self.pos}, end={self.end})"


def skip_whitespace(cursor: InputCursor) -> None:
    while is_space(cursor.peek()):
        cursor.advance()


def skip_line(cursor: InputCursor) -> None:
    """Move past the next line feed, or to the end of the buffer."""
    index = cursor.data.find(b"\n", cursor.pos, cursor.end)
    cursor.pos = cursor.end if index == -1 else index + 1


def read_float(cursor: InputCursor) -> float:
    """Read a plain decimal literal terminated by ``;``.

    Exponents are not supported. Whitespace is allowed between the literal
    and the terminator, which is left unconsumed.

    Raises:
        MalformedVersionError: If the literal does not start with a digit,
            contains anything else than digits and a single point, or is not
            terminated before the end of the buffer.
    """
    skip_whitespace(cursor)
    if not is_digit(cursor.peek()):
        raise MalformedVersionError(
            f"expected a digit but {describe(cursor.peek())} is found"
        )

    digits = 0
    scale = 0
    seen_point = False
    trailing = False

    while True:
        byte = cursor.peek()
        if byte == SEMICOLON:
            break
        if byte is None:
            raise MalformedVersionError("expected ';' after the version number")

        if is_space(byte):
            trailing = True
        elif trailing:
            raise MalformedVersionError(
                f"expected ';' but {describe(byte)} is found"
            )
        elif is_digit(byte):
            digits = digits * 10 + (byte - 48)
            if seen_point:
                scale += 1
        elif byte == DOT and not seen_point:
            seen_point = True
        else:
            raise MalformedVersionError(
                f"expected a digit but {describe(byte)} is found"
            )
        cursor.advance()

    try:
        return digits / 10**scale
    except OverflowError:
        raise MalformedVersionError("version number out of range") from None


def read_qubit_index(cursor: InputCursor) -> bytes:
    """Read a ``q[<digits>]`` reference and return its digits verbatim.

    Raises:
        MalformedQubitRefError: If ``q``, ``[``, the digit run or ``]`` is
            missing.
    """
    skip_whitespace(cursor)

    if cursor.peek() != QUBIT_REGISTER:
        raise MalformedQubitRefError(f"expected q not {describe(cursor.peek())}")
    cursor.advance()

    if cursor.peek() != OPEN_BRACKET:
        raise MalformedQubitRefError(f"expected [ not {describe(cursor.peek())}")
    cursor.advance()

    if not is_digit(cursor.peek()):
        raise MalformedQubitRefError(
            f"expected a digit but {describe(cursor.peek())} is found"
        )
    start = cursor.pos
    while is_digit(cursor.peek()):
        cursor.advance()
    index = cursor.take(start)

    if cursor.peek() != CLOSE_BRACKET:
        raise MalformedQubitRefError(f"expected ] not {describe(cursor.peek())}")
    cursor.advance()

    return index
