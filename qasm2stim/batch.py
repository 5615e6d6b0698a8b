# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

import logging
import os
from concurrent.futures import FIRST_EXCEPTION, ProcessPoolExecutor, wait
from multiprocessing import Manager
from pathlib import Path
from queue import Empty, Queue
from threading import Event, Thread

from rich.console import Console
from rich.progress import Progress, TaskID

from qasm2stim._pbar import make_progress_bar
from qasm2stim.config import TranslationConfig
from qasm2stim.files import ConversionReport, convert_file
from qasm2stim.qlogger import suspend_logging
from qasm2stim.reporter import QueueProgressReporter

logger = logging.getLogger(__name__)

PHASES_PER_FILE = 3


def queue_listener(
    queue: Queue,
    progress_bar: Progress,
    pb_task_map: dict[str, TaskID],
    done_event: Event,
    is_jupyter: bool,
):
    def apply(msg):
        progress_bar.update(
            pb_task_map[msg["job_id"]],
            advance=msg["progress"],
            message=msg.get("message", ""),
            final_status=msg.get("final_status", ""),
            refresh=is_jupyter,
        )

    while not done_event.is_set():
        try:
            msg = queue.get(timeout=0.1)
        except Empty:
            continue
        apply(msg)

    # Workers may have finished between the last poll and the event
    while True:
        try:
            msg = queue.get_nowait()
        except Empty:
            break
        apply(msg)


def _convert_in_worker(
    path: Path,
    config: TranslationConfig,
    output_dir: Path | None,
    queue: Queue,
) -> ConversionReport:
    reporter = QueueProgressReporter(job_id=str(path), progress_queue=queue)
    report = convert_file(path, config, output_dir=output_dir, reporter=reporter)
    reporter.info(f"Wrote {report.target.name}", final_status="Success")
    return report


class ConversionBatch:
    """Converts a set of ``.qasm`` files, stopping at the first failure.

    With ``max_workers == 1`` the files are converted one after the other in
    this process and progress is logged. With more workers, each file is
    converted in a separate process and progress is shown as one ``rich``
    progress bar per file. Files are independent, so the only shared state
    is the read-only gate catalog.

    If any conversion fails, files that have not started yet are cancelled
    and the error is raised. Files already written are left in place.

    Args:
        files: The circuit files to convert.
        config: Output settings shared by every file.
        output_dir: Where to write ``.stim`` files. Defaults to next to each
            source file.
        max_workers: Number of worker processes.
    """

    def __init__(
        self,
        files: list[str | os.PathLike],
        config: TranslationConfig | None = None,
        output_dir: str | os.PathLike | None = None,
        max_workers: int = 1,
    ):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1.")

        self.files = [Path(f) for f in files]
        self.config = config or TranslationConfig()
        self.output_dir = Path(output_dir) if output_dir is not None else None
        self.max_workers = max_workers

        self._running = False
        self._total_run_time = 0.0

    @property
    def total_run_time(self) -> float:
        """Sum of the per-file phase timings, in milliseconds."""
        return self._total_run_time

    def run(self) -> list[ConversionReport]:
        """Convert every file.

        Returns:
            list[ConversionReport]: One report per file, in input order.

        Raises:
            RuntimeError: If the batch is empty or already running.
            Qasm2StimError: The first conversion failure.
        """
        if self._running:
            raise RuntimeError("A batch is already being run.")

        if len(self.files) == 0:
            raise RuntimeError("No files to convert.")

        logger.debug(
            f"Converting {len(self.files)} file(s) with {self.max_workers} worker(s)"
        )

        self._running = True
        try:
            if self.max_workers == 1:
                reports = self._run_serial()
            else:
                reports = self._run_parallel()
        finally:
            self._running = False

        self._total_run_time += sum(
            r.read_ms + r.translate_ms + r.write_ms for r in reports
        )
        return reports

    def _run_serial(self) -> list[ConversionReport]:
        reports = []
        for path in self.files:
            reports.append(
                convert_file(path, self.config, output_dir=self.output_dir)
            )
        return reports

    def _run_parallel(self) -> list[ConversionReport]:
        is_jupyter = Console().is_jupyter
        progress_bar = make_progress_bar(is_jupyter=is_jupyter)

        # The bars replace per-phase log lines
        with suspend_logging(), Manager() as manager:
            queue = manager.Queue()
            done_event = Event()

            progress_bar.start()
            pb_task_map = {
                str(path): progress_bar.add_task(
                    "",
                    job_name=path.name,
                    total=PHASES_PER_FILE,
                    completed=0,
                    message="",
                    final_status="",
                )
                for path in self.files
            }

            listener = Thread(
                target=queue_listener,
                args=(queue, progress_bar, pb_task_map, done_event, is_jupyter),
                daemon=True,
            )
            listener.start()

            executor = ProcessPoolExecutor(max_workers=self.max_workers)
            try:
                futures = {
                    executor.submit(
                        _convert_in_worker, path, self.config, self.output_dir, queue
                    ): path
                    for path in self.files
                }
                wait(futures, return_when=FIRST_EXCEPTION)
            finally:
                executor.shutdown(wait=True, cancel_futures=True)
                done_event.set()
                listener.join()

            error = None
            for future, path in futures.items():
                task = pb_task_map[str(path)]
                if future.cancelled():
                    progress_bar.update(task, final_status="Cancelled")
                elif future.exception() is not None:
                    progress_bar.update(task, final_status="Failed")
                    error = error or future.exception()
                else:
                    progress_bar.update(task, final_status="Success")

            progress_bar.refresh()
            progress_bar.stop()

        if error is not None:
            raise error

        return [future.result() for future in futures]
