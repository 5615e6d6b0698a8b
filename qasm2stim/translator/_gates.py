# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import TYPE_CHECKING

from qasm2stim.exceptions import (
    GateNameTooLongError,
    MalformedQubitRefError,
    UnknownGateError,
)

from ._catalog import MAX_GATENAME_LEN, translate
from ._scanner import (
    SEMICOLON,
    InputCursor,
    describe,
    is_name_char,
    read_qubit_index,
    skip_line,
    skip_whitespace,
)

if TYPE_CHECKING:
    from ._session import TranslationSession

COMMA = ord(",")
ASSIGNMENT = b"->"


def read_gate_name(cursor: InputCursor) -> str:
    """Read the maximal run of letters and underscores at the cursor.

    Raises:
        GateNameTooLongError: If the run reaches ``MAX_GATENAME_LEN``.
        UnknownGateError: If there is no name at all at the cursor.
    """
    skip_whitespace(cursor)
    start = cursor.pos
    while is_name_char(cursor.peek()) and cursor.pos - start < MAX_GATENAME_LEN:
        cursor.advance()

    length = cursor.pos - start
    if length == MAX_GATENAME_LEN:
        raise GateNameTooLongError("gate name is too long.")
    if length == 0:
        raise UnknownGateError(
            "", f"expected a gate name but {describe(cursor.peek())} is found."
        )

    return cursor.take(start).decode("ascii")


def _at_terminator(cursor: InputCursor) -> bool:
    return (
        cursor.at_end
        or cursor.peek() == SEMICOLON
        or cursor.startswith(ASSIGNMENT)
    )


def translate_gate_statement(session: TranslationSession) -> None:
    """Translate one gate invocation and append it to the session output.

    A statement whose Stim mnemonic equals the previous one is fused onto
    the open line; otherwise a new line is started. Qubit indices are copied
    from the source without reformatting. A trailing ``-> c[...]`` mapping is
    dropped together with the rest of its line.
    """
    cursor = session.cursor
    out = session.output

    stim_name = translate(read_gate_name(cursor))

    if stim_name != session.last_mnemonic:
        session.close_gate_line()
        out.extend(stim_name.encode("ascii"))

    skip_whitespace(cursor)
    first = True
    while not _at_terminator(cursor):
        if not first:
            if cursor.peek() != COMMA:
                raise MalformedQubitRefError(
                    f"expected , not {describe(cursor.peek())}"
                )
            cursor.advance()

        # Every operand is preceded by exactly one space
        out.extend(b" ")
        out.extend(read_qubit_index(cursor))
        skip_whitespace(cursor)
        first = False

    if cursor.peek() == SEMICOLON:
        cursor.advance()
    elif cursor.startswith(ASSIGNMENT):
        skip_line(cursor)

    session.last_mnemonic = stim_name
