# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

import logging

import pytest

LIBRARY_ROOT_LOGGER_NAME = "qasm2stim"

BELL_QASM = """OPENQASM 2.0;
include "qelib1.inc";
qreg q[2];
creg c[2];
h q[0];
cx q[0],q[1];
measure q[0] -> c[0];
measure q[1] -> c[1];
"""


@pytest.fixture(autouse=True)
def reset_logging_config():
    """Restore the library logger after tests that configure it."""
    root_logger = logging.getLogger(LIBRARY_ROOT_LOGGER_NAME)
    yield
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


@pytest.fixture
def qasm_dir(tmp_path):
    """A directory holding a few circuits and some files to be ignored."""
    directory = tmp_path / "circuits"
    directory.mkdir()

    (directory / "bell.qasm").write_text(BELL_QASM)
    (directory / "ghz.qasm").write_text(
        "OPENQASM 2.0;\nqreg q[3];\nh q[0];\ncx q[0],q[1];\ncx q[1],q[2];\n"
    )
    (directory / "notes.txt").write_text("not a circuit")
    (directory / "old.qasm.bak").write_text(BELL_QASM)
    (directory / "nested.qasm").mkdir()

    return directory
