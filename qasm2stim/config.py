# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass
from enum import Enum


class LineEnding(Enum):
    """Line terminator written after every Stim line."""

    LF = b"\n"
    """Unix line endings."""

    CRLF = b"\r\n"
    """Windows line endings."""


@dataclass(frozen=True)
class TranslationConfig:
    """Settings shared by every translation in a run.

    Instances are immutable and picklable, so a single config can be handed
    to pool workers unchanged.

    Attributes:
        line_ending: Terminator emitted after each output line.
    """

    line_ending: LineEnding = LineEnding.LF
    """Line terminator for the generated Stim text."""

    @property
    def newline(self) -> bytes:
        return self.line_ending.value

    @staticmethod
    def from_flags(crlf: bool = False) -> "TranslationConfig":
        """Build a config from command-line style flags.

        Args:
            crlf: Emit ``\\r\\n`` instead of ``\\n``.

        Returns:
            TranslationConfig: The matching configuration.
        """
        return TranslationConfig(line_ending=LineEnding.CRLF if crlf else LineEnding.LF)
