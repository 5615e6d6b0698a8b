# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import NamedTuple

from qasm2stim.config import TranslationConfig

from ._directives import process_directive
from ._gates import translate_gate_statement
from ._scanner import InputCursor, skip_line, skip_whitespace

logger = logging.getLogger(__name__)

COMMENT = b"//"


class TranslationResult(NamedTuple):
    stim: bytes
    """The generated Stim circuit text."""

    qubit_count: str | None
    """Size of the last declared quantum register, as written in the source."""


class TranslationSession:
    """Translates one OpenQASM 2 buffer into Stim text in a single pass.

    The session owns the input cursor, the growable output buffer, the last
    emitted Stim mnemonic and the declared qubit count. A session is meant to
    be run once; nothing it holds is shared with other sessions.

    Args:
        qasm: Complete contents of one ``.qasm`` file.
        config: Output settings. Defaults to ``TranslationConfig()``.
    """

    def __init__(self, qasm: bytes, config: TranslationConfig | None = None):
        self.config = config or TranslationConfig()
        self.cursor = InputCursor(qasm)
        self.output = bytearray()
        self.last_mnemonic: str | None = None
        self.qubit_count: str | None = None

    def close_gate_line(self) -> None:
        """Terminate the open gate line, if any, and reset run compaction."""
        if self.last_mnemonic is not None:
            self.output.extend(self.config.newline)
        self.last_mnemonic = None

    def run(self) -> TranslationResult:
        """Translate the whole buffer.

        Returns:
            TranslationResult: The Stim text and the declared qubit count.

        Raises:
            Qasm2StimError: On the first malformed or unsupported construct.
                Nothing is returned in that case.
        """
        cursor = self.cursor

        while True:
            skip_whitespace(cursor)
            if cursor.at_end:
                break

            if cursor.startswith(COMMENT):
                skip_line(cursor)
            elif not process_directive(self):
                translate_gate_statement(self)

        self.output.extend(self.config.newline)

        logger.debug(
            f"Translated {cursor.end} bytes of QASM into {len(self.output)} bytes of Stim"
        )

        return TranslationResult(bytes(self.output), self.qubit_count)


def translate_qasm(
    qasm: bytes | str, config: TranslationConfig | None = None
) -> TranslationResult:
    """Translate an OpenQASM 2 program into Stim circuit text.

    Args:
        qasm: The program. Text is encoded as UTF-8 first.
        config: Output settings.

    Returns:
        TranslationResult: The Stim text and the declared qubit count.
    """
    if isinstance(qasm, str):
        qasm = qasm.encode("utf-8")

    return TranslationSession(qasm, config).run()
