#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""hash runtime configuration for CLI startup."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from hashrun.config.defaults import DEFAULT_POLL_INTERVAL

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_poll_interval(value: str | float) -> float:
    """Parse a positive polling interval in seconds."""
    interval = float(value)
    if interval <= 0:
        raise ValueError(f"Poll interval must be positive: {value}")
    return interval


@define
class HashRuntimeConfig(RuntimeConfig):
    """hash runtime configuration for CLI startup."""

    log_level: str = field(
        default="WARNING",
        env_var="HASH_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for hash operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    setup_log_level: str = field(
        default="WARNING",
        env_var="HASH_SETUP_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for Foundation setup messages during initialization"},
    )

    poll_interval: float = field(
        default=DEFAULT_POLL_INTERVAL,
        env_var="HASH_POLL_INTERVAL",
        converter=parse_poll_interval,
        metadata={"help": "Seconds between mounted partition scans in watch mode"},
    )

# #️⃣🔚
