# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations


class Qasm2StimError(Exception):
    """Base class for every error raised while converting a circuit.

    All errors are fatal: a conversion that raises one of these produces no
    output, and a batch stops at the first one.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InaccessibleFileError(Qasm2StimError):
    """A circuit file or directory does not exist or cannot be read."""

    def __init__(self, path, reason: str = "is inaccessible") -> None:
        super().__init__(f"File path {path} {reason}.")
        self.path = path
        self.reason = reason

    # Errors cross process boundaries in batch mode
    def __reduce__(self):
        return (type(self), (self.path, self.reason))


class UnsupportedVersionError(Qasm2StimError):
    def __init__(self, version: float) -> None:
        super().__init__(f"QASM version {version:.3f} not compatible.")
        self.version = version

    def __reduce__(self):
        return (type(self), (self.version,))


class MalformedVersionError(Qasm2StimError):
    pass


class MalformedQubitRefError(Qasm2StimError):
    pass


class GateNameTooLongError(Qasm2StimError):
    pass


class UnknownGateError(Qasm2StimError):
    def __init__(self, name: str, message: str | None = None) -> None:
        super().__init__(message or f"unknown gate {name}.")
        self.name = name

    def __reduce__(self):
        return (type(self), (self.name, self.message))
