# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

import logging
import os
import stat
import time
from dataclasses import dataclass
from pathlib import Path

from qasm2stim.config import TranslationConfig
from qasm2stim.exceptions import InaccessibleFileError
from qasm2stim.reporter import LoggingProgressReporter, ProgressReporter
from qasm2stim.translator import translate_qasm

logger = logging.getLogger(__name__)

QASM_SUFFIX = ".qasm"
STIM_SUFFIX = ".stim"
MB = 0x00100000


class Timer:
    def __init__(self):
        self._start = 0.0
        self._end = 0.0

    def start(self):
        self._start = time.perf_counter()

    def stop(self):
        self._end = time.perf_counter()

    @property
    def milliseconds(self) -> float:
        return (self._end - self._start) * 1000.0


@dataclass(frozen=True)
class ConversionReport:
    """Outcome of converting one ``.qasm`` file."""

    source: Path
    target: Path
    qubit_count: str | None
    size: int
    """Size of the source file in bytes."""
    read_ms: float
    translate_ms: float
    write_ms: float


def check_access(path: str | os.PathLike) -> os.stat_result:
    """Ensure ``path`` exists and is readable.

    Returns:
        os.stat_result: The file status, so callers need not stat twice.

    Raises:
        InaccessibleFileError: If the path is missing or unreadable.
    """
    try:
        st = os.stat(path)
    except OSError as e:
        raise InaccessibleFileError(path) from e

    if not os.access(path, os.R_OK):
        raise InaccessibleFileError(path)

    return st


def find_qasm_files(directory: str | os.PathLike) -> list[Path]:
    """List the ``.qasm`` files directly inside ``directory``, sorted by name.

    Subdirectories are not searched.
    """
    directory = Path(directory)
    st = check_access(directory)
    if not stat.S_ISDIR(st.st_mode):
        raise InaccessibleFileError(directory, "is not a directory")

    try:
        return sorted(
            entry
            for entry in directory.iterdir()
            if entry.suffix == QASM_SUFFIX and entry.is_file()
        )
    except OSError as e:
        raise InaccessibleFileError(directory, "cannot be listed") from e


def stim_path_for(
    path: str | os.PathLike, output_dir: str | os.PathLike | None = None
) -> Path:
    """Derive the ``.stim`` path for a circuit file.

    The last extension is replaced by ``.stim``. The file lands next to its
    source unless ``output_dir`` is given.
    """
    path = Path(path)
    target = path.with_suffix(STIM_SUFFIX)
    if output_dir is not None:
        target = Path(output_dir) / target.name
    return target


def convert_file(
    path: str | os.PathLike,
    config: TranslationConfig | None = None,
    output_dir: str | os.PathLike | None = None,
    reporter: ProgressReporter | None = None,
) -> ConversionReport:
    """Read one ``.qasm`` file, translate it and write the ``.stim`` file.

    The output file is only created once the whole translation succeeded.

    Args:
        path: The circuit file.
        config: Output settings.
        output_dir: Directory for the ``.stim`` file. Defaults to the source
            file's directory.
        reporter: Receives one ``info``/``update`` pair per phase. Defaults to
            a :class:`LoggingProgressReporter`.

    Returns:
        ConversionReport: Paths, qubit count and per-phase timings.

    Raises:
        Qasm2StimError: If the file is inaccessible or the translation fails.
    """
    path = Path(path)
    reporter = reporter or LoggingProgressReporter()
    timer = Timer()

    size = check_access(path).st_size
    message = f'Parsing circuit file "{path}" (size: {size // MB} MB)..'
    reporter.info(message, pending=True)
    timer.start()
    try:
        qasm = path.read_bytes()
    except OSError as e:
        raise InaccessibleFileError(path, "cannot be opened") from e
    timer.stop()
    read_ms = timer.milliseconds
    reporter.update(message=message, elapsed_ms=read_ms)

    message = "Translating QASM circuit to Stim.."
    reporter.info(message, pending=True)
    timer.start()
    result = translate_qasm(qasm, config)
    timer.stop()
    translate_ms = timer.milliseconds
    reporter.update(
        message=f"{message}(found {result.qubit_count} qubits)",
        elapsed_ms=translate_ms,
    )

    target = stim_path_for(path, output_dir)
    message = f"Writing Stim circuit to file {target}.."
    reporter.info(message, pending=True)
    timer.start()
    try:
        target.write_bytes(result.stim)
    except OSError as e:
        raise InaccessibleFileError(target, "cannot be written") from e
    timer.stop()
    write_ms = timer.milliseconds
    reporter.update(message=message, elapsed_ms=write_ms)

    return ConversionReport(
        source=path,
        target=target,
        qubit_count=result.qubit_count,
        size=size,
        read_ms=read_ms,
        translate_ms=translate_ms,
        write_ms=write_ms,
    )
