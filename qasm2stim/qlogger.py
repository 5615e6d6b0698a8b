# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

import logging
import re
import shutil
import sys
from contextlib import contextmanager

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


class OverwriteStreamHandler(logging.StreamHandler):
    """Stream handler that lets a message rewrite the current terminal line.

    A message ending in ``\\r`` is written without a newline so the next one
    replaces it; a message ending in ``\\r\\n`` replaces it and finishes the
    line. Anything else is written as a normal line.
    """

    def __init__(self, stream=None):
        super().__init__(stream)

        self._pending_length = 0

    def emit(self, record):
        msg = self.format(record)

        if msg.endswith("\r\n"):
            text, finish = msg[:-2], True
        elif msg.endswith("\r"):
            text, finish = msg[:-1], False
        else:
            self._clear_pending()
            self.stream.write(msg + "\n")
            self.stream.flush()
            return

        self._clear_pending()
        if finish:
            self.stream.write(text + "\n")
        else:
            self.stream.write(text + "\r")
            self._pending_length = len(_ANSI_ESCAPE.sub("", text))

        self.stream.flush()

    def _clear_pending(self):
        if self._pending_length > 0:
            width = min(self._pending_length, shutil.get_terminal_size().columns)
            self.stream.write("\r" + " " * width + "\r")
            self._pending_length = 0


def enable_logging(level=logging.INFO):
    root_logger = logging.getLogger(__name__.split(".")[0])

    handler = OverwriteStreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)


def disable_logging():
    root_logger = logging.getLogger(__name__.split(".")[0])
    root_logger.handlers.clear()
    root_logger.setLevel(logging.CRITICAL + 1)


@contextmanager
def suspend_logging():
    """Silence the package logger for the duration of the block.

    Level and handlers are restored afterwards, so whatever
    :func:`enable_logging` set up before keeps working.
    """
    root_logger = logging.getLogger(__name__.split(".")[0])
    level = root_logger.level
    handlers = list(root_logger.handlers)

    disable_logging()
    try:
        yield
    finally:
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)
