#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the hash CLI."""

from __future__ import annotations

from hashrun.commands.install import install_command
from hashrun.commands.run import run_command

__all__ = [
    "install_command",
    "run_command",
]

# #️⃣🔚
