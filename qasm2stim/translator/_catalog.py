# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

from typing import NamedTuple

from qasm2stim.exceptions import UnknownGateError


class GateSpec(NamedTuple):
    qasm_name: str
    stim_name: str


GATE_CATALOG: tuple[GateSpec, ...] = (
    GateSpec("i", "I"),
    GateSpec("x", "X"),
    GateSpec("y", "Y"),
    GateSpec("z", "Z"),
    GateSpec("h", "H"),
    GateSpec("s", "S"),
    GateSpec("sdg", "S_DAG"),
    GateSpec("cx", "CX"),
    GateSpec("cy", "CY"),
    GateSpec("cz", "CZ"),
    GateSpec("swap", "SWAP"),
    GateSpec("iswap", "ISWAP"),
    GateSpec("measure", "M"),
)

MAX_GATENAME_LEN = 16


def translate(mnemonic: str) -> str:
    """Map a QASM gate mnemonic onto its Stim counterpart.

    Only whole-name matches count, so ``sd`` or ``swapx`` never resolve to
    ``s`` or ``swap``.

    Args:
        mnemonic: The QASM gate name as written in the source.

    Returns:
        str: The Stim gate name.

    Raises:
        UnknownGateError: If the name is not one of the supported Clifford
            operations. User-defined gates are never registered, so calling
            one ends up here as well.
    """
    for spec in GATE_CATALOG:
        if spec.qasm_name == mnemonic:
            return spec.stim_name

    raise UnknownGateError(mnemonic)
