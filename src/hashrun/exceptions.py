#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for hash."""

from __future__ import annotations

from pathlib import Path

from provide.foundation.errors import FoundationError


class HashError(FoundationError):
    """Base exception for all hash-related errors."""

    pass


class ScriptNotFoundError(HashError):
    """Raised when a script path does not point to a regular file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Script not found: {path}")


class UnsupportedScriptError(HashError):
    """Raised for files that are not runnable scripts.

    Covers a wrong suffix, an oversized file, and decoded text that is not UTF-8.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Unsupported script: {path}")


class TransformError(HashError):
    """Raised when a decoder or encoder command exits unsuccessfully."""

    def __init__(self, command: str, returncode: int | None = None) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__("Transform failed")


class ScriptExecutionError(HashError):
    """Raised when the shell for a script cannot be started.

    The message names the script file only, never its decoded contents.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to execute script {path}: {reason}")


class InstallError(HashError):
    """Raised when a step of the system installation fails."""

    def __init__(self, step: str, reason: str) -> None:
        self.step = step
        self.reason = reason
        super().__init__(f"Install step '{step}' failed: {reason}")


# #️⃣🔚
