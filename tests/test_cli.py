# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

import logging
import subprocess
import sys

import pytest

from qasm2stim.cli import build_parser, main


def test_requires_directory(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 2
    assert "-d" in capsys.readouterr().err


def test_rejects_invalid_jobs(qasm_dir):
    with pytest.raises(SystemExit) as exc_info:
        main(["-d", str(qasm_dir), "-j", "0"])

    assert exc_info.value.code == 2


def test_verbosity_flags_are_exclusive():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-d", ".", "-v", "-q"])


def test_converts_directory(qasm_dir):
    assert main(["-d", str(qasm_dir), "-q"]) == 0

    assert (qasm_dir / "bell.stim").read_bytes() == b"#2\nH 0\nCX 0 1\nM 0 1\n"
    assert (qasm_dir / "ghz.stim").exists()
    assert not (qasm_dir / "notes.stim").exists()


def test_output_dir_is_created(qasm_dir, tmp_path):
    out = tmp_path / "nested" / "out"

    assert main(["-d", str(qasm_dir), "-o", str(out), "--crlf", "-q"]) == 0

    assert (out / "ghz.stim").read_bytes() == b"#3\r\nH 0\r\nCX 0 1 1 2\r\n"
    assert not (qasm_dir / "ghz.stim").exists()


def test_output_dir_that_cannot_be_created(qasm_dir, capsys):
    out = qasm_dir / "bell.qasm" / "out"

    assert main(["-d", str(qasm_dir), "-o", str(out), "-q"]) == 1

    assert "cannot be created" in capsys.readouterr().err
    assert not (qasm_dir / "bell.stim").exists()


def test_logs_progress(qasm_dir, capsys):
    assert main(["-d", str(qasm_dir)]) == 0

    out = capsys.readouterr().out
    assert "Parsing circuit file" in out
    assert "(found 3 qubits) done in" in out
    assert "Converted 2 file(s)" in out


def test_parallel_run_keeps_summary_log(qasm_dir, capsys):
    assert main(["-d", str(qasm_dir), "-j", "2"]) == 0

    assert "Converted 2 file(s)" in capsys.readouterr().out
    assert logging.getLogger("qasm2stim").level == logging.INFO


def test_verbose_enables_debug(qasm_dir):
    main(["-d", str(qasm_dir), "-v"])
    assert logging.getLogger("qasm2stim").level == logging.DEBUG


def test_translation_error_exits_with_status_1(qasm_dir, capsys):
    (qasm_dir / "a_v3.qasm").write_text("OPENQASM 3.0;\nqreg q[1];\nh q[0];\n")

    assert main(["-d", str(qasm_dir), "-q"]) == 1

    assert "ERROR: QASM version 3.000 not compatible." in capsys.readouterr().err
    # Files after the failing one are not processed
    assert not (qasm_dir / "bell.stim").exists()


def test_missing_directory(tmp_path, capsys):
    assert main(["-d", str(tmp_path / "missing"), "-q"]) == 1
    assert "is inaccessible" in capsys.readouterr().err


def test_empty_directory(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="qasm2stim"):
        assert main(["-d", str(tmp_path)]) == 0

    assert "No .qasm files found" in caplog.text


def test_module_entry_point(qasm_dir):
    cmd = [sys.executable, "-m", "qasm2stim", "-d", str(qasm_dir), "-q"]
    completed = subprocess.run(cmd, capture_output=True, text=True)

    assert completed.returncode == 0
    assert (qasm_dir / "bell.stim").exists()
