# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

__version__ = "0.1"

from .config import LineEnding, TranslationConfig
from .exceptions import (
    GateNameTooLongError,
    InaccessibleFileError,
    MalformedQubitRefError,
    MalformedVersionError,
    Qasm2StimError,
    UnknownGateError,
    UnsupportedVersionError,
)
from .translator import TranslationResult, translate_qasm
from .files import ConversionReport, convert_file, find_qasm_files, stim_path_for
from .batch import ConversionBatch
