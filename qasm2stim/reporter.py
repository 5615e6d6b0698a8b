# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

import logging
from abc import ABC, abstractmethod
from queue import Queue

logger = logging.getLogger(__name__)


class ProgressReporter(ABC):
    """An abstract base class for reporting progress of a file conversion."""

    @abstractmethod
    def update(self, **kwargs):
        """Reports that a conversion phase has finished."""
        pass

    @abstractmethod
    def info(self, message: str, **kwargs):
        """
        Provides a simple informational message.
        No changes to progress or state.
        """
        pass


class QueueProgressReporter(ProgressReporter):
    """Reports progress by putting structured dictionaries onto a Queue.

    Used from pool workers, where the progress bar lives in another process.
    """

    def __init__(self, job_id: str, progress_queue: Queue):
        self._job_id = job_id
        self._queue = progress_queue

    def update(self, **kwargs):
        payload = {"job_id": self._job_id, "progress": 1}
        if "message" in kwargs:
            payload["message"] = kwargs["message"]
        self._queue.put(payload)

    def info(self, message: str, **kwargs):
        payload = {"job_id": self._job_id, "progress": 0, "message": message}
        if "final_status" in kwargs:
            payload["final_status"] = kwargs["final_status"]
        self._queue.put(payload)


class LoggingProgressReporter(ProgressReporter):
    """Reports progress by logging messages to the console.

    A phase is announced with ``info(..., pending=True)`` and completed with
    ``update(message=..., elapsed_ms=...)``, which rewrites the same line.
    """

    def update(self, **kwargs):
        message = kwargs.get("message", "")
        if "elapsed_ms" in kwargs:
            message = f"{message} done in {kwargs['elapsed_ms']:.2f} milliseconds."
        logger.info(f"{message}\r\n")

    def info(self, message: str, **kwargs):
        if kwargs.get("pending"):
            logger.info(f"{message}\r")
            return

        logger.info(message)
