#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""hash configuration: defaults and environment-driven runtime settings."""

from __future__ import annotations

from hashrun.config.runtime import HashRuntimeConfig

__all__ = [
    "HashRuntimeConfig",
]

# #️⃣🔚
