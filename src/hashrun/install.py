#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""System installation: udev automount rule, binary, and systemd service."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
import stat

from provide.foundation import logger
from provide.foundation.file import atomic_write_text, safe_copy
from provide.foundation.file.directory import ensure_parent_dir
from provide.foundation.process import run

from hashrun.config.defaults import (
    BINARY_INSTALL_PATH,
    DEFAULT_MOUNT_POINT,
    SERVICE_INSTALL_PATH,
    SERVICE_NAME,
    UDEV_RULE_TEMPLATE,
    UDEV_RULES_PATH,
)
from hashrun.exceptions import InstallError

SERVICE_UNIT_TEMPLATE = """\
[Unit]
Description=Hash headless autorun
After=local-fs.target

[Service]
Type=simple
ExecStart={exec_path} run --watch {mount_point}
Restart=on-failure

[Install]
WantedBy=multi-user.target
"""


def render_udev_rule(mount_point: str = DEFAULT_MOUNT_POINT) -> str:
    """Return the udev rule line that automounts USB partitions on ``mount_point``."""
    return UDEV_RULE_TEMPLATE.format(mount_point=mount_point)


def render_service_unit(exec_path: str, mount_point: str = DEFAULT_MOUNT_POINT) -> str:
    """Return the default systemd unit running ``hash`` in watch mode."""
    return SERVICE_UNIT_TEMPLATE.format(exec_path=exec_path, mount_point=mount_point)


class Installer:
    """Installs hash as a udev-triggered, systemd-managed service.

    Steps run in a fixed order and stop at the first failure. Nothing already
    written is rolled back. With an alternate ``root`` the files are staged
    under it and the udevadm/systemctl steps are skipped.
    """

    def __init__(
        self,
        binary: Path,
        service_file: Path | None = None,
        root: Path = Path("/"),
        mount_point: str = DEFAULT_MOUNT_POINT,
        dry_run: bool = False,
    ) -> None:
        self.binary = binary
        self.service_file = service_file
        self.root = root
        self.mount_point = mount_point
        self.dry_run = dry_run

    @property
    def udev_rule_path(self) -> Path:
        return self.root / UDEV_RULES_PATH

    @property
    def binary_path(self) -> Path:
        return self.root / BINARY_INSTALL_PATH

    @property
    def service_path(self) -> Path:
        return self.root / SERVICE_INSTALL_PATH

    @property
    def manages_services(self) -> bool:
        """System commands only make sense for the running system."""
        return self.root == Path("/")

    def steps(self) -> list[tuple[str, Callable[[], None]]]:
        """Ordered installation steps as (name, action) pairs."""
        steps: list[tuple[str, Callable[[], None]]] = [("write udev rule", self.write_udev_rule)]
        if self.manages_services:
            steps.append(("reload udev rules", lambda: self._system("udevadm", "control", "--reload-rules")))
        steps += [
            ("copy binary", self.copy_binary),
            ("make binary executable", self.make_executable),
            ("install service unit", self.install_service_unit),
        ]
        if self.manages_services:
            steps += [
                ("enable service", lambda: self._system("systemctl", "enable", SERVICE_NAME)),
                ("start service", lambda: self._system("systemctl", "start", SERVICE_NAME)),
            ]
        return steps

    def install(self) -> list[str]:
        """Run every installation step.

        Returns:
            list[str]: Names of the steps performed (or planned, in dry-run mode)

        Raises:
            InstallError: If a step fails
        """
        if not self.binary.is_file() and not self.dry_run:
            raise InstallError("copy binary", f"binary not found: {self.binary}")

        done = []
        for name, action in self.steps():
            if self.dry_run:
                logger.info(f"🔍 Would {name}")
                done.append(name)
                continue

            logger.debug(f"🔧 {name}")
            try:
                action()
            except Exception as e:
                raise InstallError(name, str(e)) from e
            done.append(name)

        if not self.dry_run:
            logger.info("✅ Hash installed")
        return done

    def write_udev_rule(self) -> None:
        ensure_parent_dir(self.udev_rule_path)
        atomic_write_text(self.udev_rule_path, render_udev_rule(self.mount_point) + "\n")

    def copy_binary(self) -> None:
        ensure_parent_dir(self.binary_path)
        safe_copy(self.binary, self.binary_path, preserve_mode=True, overwrite=True)

    def make_executable(self) -> None:
        mode = self.binary_path.stat().st_mode
        self.binary_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    def install_service_unit(self) -> None:
        ensure_parent_dir(self.service_path)
        if self.service_file is not None:
            safe_copy(self.service_file, self.service_path, overwrite=True)
        else:
            exec_path = "/" + BINARY_INSTALL_PATH
            atomic_write_text(self.service_path, render_service_unit(exec_path, self.mount_point))

    def _system(self, *args: str) -> None:
        result = run(list(args), capture_output=True, check=False)
        if result.returncode != 0:
            stderr = result.stderr.strip() if isinstance(result.stderr, str) else result.stderr
            raise RuntimeError(f"{' '.join(args)} exited with code {result.returncode}: {stderr}")


# #️⃣🔚
