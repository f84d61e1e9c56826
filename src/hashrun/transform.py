#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shell filter plumbing for script decoding and output encoding."""

from __future__ import annotations

from provide.foundation import logger
from provide.foundation.process import run

from hashrun.config.defaults import SCRIPT_SHELL
from hashrun.exceptions import TransformError


def as_bytes(value: bytes | str | None) -> bytes:
    """Normalize captured process output to bytes."""
    if value is None:
        return b""
    if isinstance(value, str):
        return value.encode("utf-8", errors="surrogateescape")
    return value


def transform(data: bytes, command: str | None) -> bytes:
    """Pass ``data`` through a shell filter command.

    The command runs under ``sh -c`` with ``data`` on stdin; its stdout is the
    result. Without a command the data is returned unchanged.

    Args:
        data: Bytes to feed to the filter
        command: Shell command line, or None for pass-through

    Returns:
        bytes: The filter's stdout

    Raises:
        TransformError: If the filter exits with a non-zero status
    """
    if not command:
        return data

    logger.debug(f"🔐 Transforming {len(data)} bytes through filter")
    result = run(
        [SCRIPT_SHELL, "-c", command],
        input=data,
        capture_output=True,
        text=False,
        check=False,
    )

    if result.returncode != 0:
        stderr = as_bytes(result.stderr)
        logger.warning(
            f"⚠️ Filter exited with code {result.returncode}: {stderr[:500].decode(errors='replace')}"
        )
        raise TransformError(command, result.returncode)

    return as_bytes(result.stdout)


# #️⃣🔚
