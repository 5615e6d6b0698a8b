# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from qasm2stim.exceptions import UnsupportedVersionError

from ._scanner import read_float, read_qubit_index, skip_line

if TYPE_CHECKING:
    from ._session import TranslationSession

logger = logging.getLogger(__name__)

SUPPORTED_VERSION = 2.0


def _version(session: TranslationSession) -> None:
    version = read_float(session.cursor)
    if version != SUPPORTED_VERSION:
        raise UnsupportedVersionError(version)
    skip_line(session.cursor)


def _quantum_register(session: TranslationSession) -> None:
    count = read_qubit_index(session.cursor)
    session.qubit_count = count.decode("ascii")

    # The header lands exactly where the register was declared.
    session.output.extend(b"#" + count + session.config.newline)

    logger.debug(f"Declared quantum register with {session.qubit_count} qubits")
    skip_line(session.cursor)


def _discard(session: TranslationSession) -> None:
    skip_line(session.cursor)


def _gate_definition(session: TranslationSession) -> None:
    # Only the declaring line is dropped; a multi-line body is read as
    # ordinary statements afterwards.
    logger.debug("Skipping gate definition; user-defined gates are unsupported")
    skip_line(session.cursor)


DIRECTIVES: tuple[tuple[bytes, Callable[[TranslationSession], None]], ...] = (
    (b"OPENQASM", _version),
    (b"qreg", _quantum_register),
    (b"creg", _discard),
    (b"include", _discard),
    (b"gate", _gate_definition),
)


def process_directive(session: TranslationSession) -> bool:
    """Handle the directive at the cursor, if there is one.

    Any open gate line is terminated first and run compaction starts over
    after the directive.

    Returns:
        bool: ``True`` if a directive was consumed, ``False`` if the cursor
            is on something else.
    """
    cursor = session.cursor

    for keyword, handler in DIRECTIVES:
        if cursor.startswith(keyword):
            session.close_gate_line()
            cursor.advance(len(keyword))
            handler(session)
            return True

    return False
