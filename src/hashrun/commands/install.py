#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Install command for the hash CLI."""

from __future__ import annotations

from pathlib import Path
import shutil
import sys

import click
from provide.foundation.console import perr, pout

from hashrun.config.defaults import DEFAULT_MOUNT_POINT
from hashrun.console import get_command_logger
from hashrun.exceptions import InstallError
from hashrun.install import Installer

# Get structured logger for this command
log = get_command_logger("install")


def find_binary() -> Path | None:
    """Locate the installed ``hash`` executable."""
    found = shutil.which("hash")
    if found:
        return Path(found)
    argv0 = Path(sys.argv[0])
    return argv0.resolve() if argv0.is_file() else None


@click.command("install")
@click.option(
    "--binary",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Executable to install (defaults to the 'hash' on PATH)",
)
@click.option(
    "--service-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Service unit to install (a default unit is generated when omitted)",
)
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default="/",
    show_default=True,
    help="Install under an alternate root; udevadm and systemctl are skipped",
)
@click.option(
    "--mount-point",
    default=DEFAULT_MOUNT_POINT,
    show_default=True,
    help="Where removable media is automounted and watched",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show the installation steps without performing them",
)
def install_command(
    binary: Path | None,
    service_file: Path | None,
    root: Path,
    mount_point: str,
    dry_run: bool,
) -> None:
    """Install the udev automount rule and the hash service."""
    binary = binary or find_binary()
    if binary is None:
        perr("❌ Could not locate the hash executable; pass --binary")
        raise click.Abort()

    installer = Installer(
        binary,
        service_file=service_file,
        root=root,
        mount_point=mount_point,
        dry_run=dry_run,
    )
    log.debug("Install command started", binary=str(binary), root=str(root), dry_run=dry_run)

    if dry_run:
        pout("🔍 DRY RUN - Nothing will be changed\n")

    try:
        steps = installer.install()
    except InstallError as e:
        log.error("Install failed", step=e.step, error=e.reason)
        perr(f"❌ {e}")
        raise click.Abort() from e

    for step in steps:
        pout(f"  - {step}")
    if not dry_run:
        pout("Hash installed")


# #️⃣🔚
