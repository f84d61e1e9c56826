#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for hash tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
import datetime
from pathlib import Path
import shutil
from unittest.mock import Mock

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

FIXED_NOW = datetime.datetime(2025, 3, 14, 15, 9, 26, tzinfo=datetime.timezone.utc)


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-skip integration tests when a POSIX shell is not available."""
    if shutil.which("sh") is not None:
        return

    skip_integration = pytest.mark.skip(reason="'sh' not found on PATH")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def fixed_now() -> datetime.datetime:
    return FIXED_NOW


@pytest.fixture
def scripts_dir(tmp_path: Path) -> Path:
    """A directory holding one hello script, one foreign file and one hidden script."""
    directory = tmp_path / "media"
    directory.mkdir()
    (directory / "hello.ha.sh").write_text('echo "hello $HASH_HOST"\n')
    (directory / "notes.txt").write_text("not a script\n")
    (directory / ".hidden.ha.sh").write_text("echo hidden\n")
    return directory


@pytest.fixture
def make_completed() -> Callable[..., Mock]:
    """Factory for fake completed processes as returned by ``provide.foundation.process.run``."""

    def _completed(returncode: int = 0, stdout: bytes = b"", stderr: bytes = b"") -> Mock:
        result = Mock()
        result.returncode = returncode
        result.stdout = stdout
        result.stderr = stderr
        return result

    return _completed


# #️⃣🔚
