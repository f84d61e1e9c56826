#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""hash: headless autorun of ``*.ha.sh`` scripts."""

from __future__ import annotations

from provide.foundation.utils import get_version

from hashrun.exceptions import (
    HashError,
    InstallError,
    ScriptExecutionError,
    ScriptNotFoundError,
    TransformError,
    UnsupportedScriptError,
)
from hashrun.runner import Runner
from hashrun.script import Script

__version__ = get_version("hash-autorun", caller_file=__file__)

__all__ = [
    "HashError",
    "InstallError",
    "Runner",
    "Script",
    "ScriptExecutionError",
    "ScriptNotFoundError",
    "TransformError",
    "UnsupportedScriptError",
    "__version__",
]

# #️⃣🔚
