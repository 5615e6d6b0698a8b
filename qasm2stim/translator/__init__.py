# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

from ._catalog import GATE_CATALOG, GateSpec, translate
from ._session import TranslationResult, TranslationSession, translate_qasm
