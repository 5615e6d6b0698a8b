# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

import pytest

from qasm2stim.exceptions import UnknownGateError
from qasm2stim.translator import GATE_CATALOG, translate

EXPECTED_PAIRS = [
    ("i", "I"),
    ("x", "X"),
    ("y", "Y"),
    ("z", "Z"),
    ("h", "H"),
    ("s", "S"),
    ("sdg", "S_DAG"),
    ("cx", "CX"),
    ("cy", "CY"),
    ("cz", "CZ"),
    ("swap", "SWAP"),
    ("iswap", "ISWAP"),
    ("measure", "M"),
]


def test_catalog_contents_and_order():
    assert [tuple(spec) for spec in GATE_CATALOG] == EXPECTED_PAIRS


def test_catalog_names_are_unique():
    names = [spec.qasm_name for spec in GATE_CATALOG]
    assert len(names) == len(set(names))


@pytest.mark.parametrize("qasm_name,stim_name", EXPECTED_PAIRS)
def test_translate(qasm_name, stim_name):
    assert translate(qasm_name) == stim_name


@pytest.mark.parametrize(
    "name",
    ["t", "tdg", "sd", "sdgx", "swa", "swapp", "measur", "H", "CX", "u3", ""],
    ids=[
        "NonClifford",
        "NonCliffordAdjoint",
        "Prefix",
        "Extension",
        "TruncatedSwap",
        "LongerSwap",
        "TruncatedMeasure",
        "UpperCase",
        "UpperCaseCX",
        "Parameterized",
        "Empty",
    ],
)
def test_translate_rejects_inexact_names(name):
    with pytest.raises(UnknownGateError) as exc_info:
        translate(name)

    assert exc_info.value.name == name
