#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Autorun script discovery and validation."""

from __future__ import annotations

from pathlib import Path

from attrs import frozen

from hashrun.config.defaults import SCRIPT_SUFFIX
from hashrun.exceptions import ScriptNotFoundError, UnsupportedScriptError


@frozen
class Script:
    """A validated ``*.ha.sh`` script on disk."""

    path: Path

    @classmethod
    def from_file(cls, path: Path) -> Script:
        """Validate ``path`` and return a script pointing at its resolved location.

        The suffix is checked before existence, so a missing file with the wrong
        suffix is reported as unsupported.

        Raises:
            UnsupportedScriptError: If the file name does not end with ``.ha.sh``
            ScriptNotFoundError: If the path is not a regular file
        """
        if not str(path).endswith(SCRIPT_SUFFIX):
            raise UnsupportedScriptError(path)
        if not path.is_file():
            raise ScriptNotFoundError(path)
        return cls(path=path.resolve(strict=True))

    @property
    def parent(self) -> Path:
        return self.path.parent

    @property
    def name(self) -> str:
        """File name with the script suffix removed."""
        return self.path.name.replace(SCRIPT_SUFFIX, "")

    def size(self) -> int:
        return self.path.stat().st_size

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()


# #️⃣🔚
