#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for hash configuration."""

from __future__ import annotations

# =================================
# Script defaults
# =================================
SCRIPT_SUFFIX = ".ha.sh"
MAX_SCRIPT_SIZE = 655_360  # 640 KiB
HIDDEN_PREFIX = "."
SCRIPT_SHELL = "sh"

# =================================
# Run directory layout
# =================================
RUN_DIR_INFIX = "-run-"
RUN_DIR_TIME_FORMAT = "%Y-%m-%d-%H-%M-%S"  # UTC
STDOUT_LOG = "stdout.log"
STDERR_LOG = "stderr.log"
ERROR_LOG = "error.log"

# =================================
# Script environment
# =================================
ENV_HOST = "HASH_HOST"
ENV_DECODER = "HASH_DECODER"
ENV_ENCODER = "HASH_ENCODER"
ENV_SCRIPT = "HASH_SCRIPT"
ENV_RUN_DIR = "HASH_RUN_DIR"

DEFAULT_HOST_ID_TEMPLATE = "Hash host v{version}"

# =================================
# Mount watching defaults
# =================================
DEFAULT_POLL_INTERVAL = 1.0  # seconds between partition scans
DEFAULT_MOUNT_DEBOUNCE = 1.0  # events closer than this are coalesced

# =================================
# Installation defaults
# =================================
SERVICE_NAME = "hash"
DEFAULT_MOUNT_POINT = "/media/hash"
UDEV_RULES_PATH = "etc/udev/rules.d/99-hash-aoutomount.rules"
BINARY_INSTALL_PATH = "usr/local/bin/hash"
SERVICE_INSTALL_PATH = "etc/systemd/system/hash.service"
UDEV_RULE_TEMPLATE = (
    'ACTION=="add", KERNEL=="sd[a-z][0-9]", '
    'RUN+="/usr/bin/systemd-mount --no-block --automount=yes --collect $devnode {mount_point}"'
)

# #️⃣🔚
