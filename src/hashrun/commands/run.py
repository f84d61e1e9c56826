#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Run command for the hash CLI."""

from __future__ import annotations

from pathlib import Path
import sys

import click
from provide.foundation.console import perr

from hashrun.config import HashRuntimeConfig
from hashrun.config.defaults import (
    DEFAULT_HOST_ID_TEMPLATE,
    ENV_DECODER,
    ENV_ENCODER,
    ENV_HOST,
)
from hashrun.console import get_command_logger
from hashrun.exceptions import HashError
from hashrun.runner import Runner

# Get structured logger for this command
log = get_command_logger("run")


def default_host_id() -> str:
    from hashrun import __version__

    return DEFAULT_HOST_ID_TEMPLATE.format(version=__version__)


@click.command("run")
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--id", "-i", "host_id", envvar=ENV_HOST, help="Host id")
@click.option("--decoder", "-d", envvar=ENV_DECODER, help="Script decoder")
@click.option("--encoder", "-e", envvar=ENV_ENCODER, help="Stdout encoder")
@click.option(
    "--watch",
    "-w",
    is_flag=True,
    hidden=not sys.platform.startswith("linux"),
    help="Watch for removable media",
)
def run_command(
    path: Path,
    host_id: str | None,
    decoder: str | None,
    encoder: str | None,
    watch: bool,
) -> None:
    """Run a script or every script in a directory."""
    runtime = HashRuntimeConfig.from_env()
    runner = Runner(
        host_id or default_host_id(),
        decoder=decoder,
        encoder=encoder,
        poll_interval=runtime.poll_interval,
    )
    log.debug(
        "Run command started",
        path=str(path),
        watch=watch,
        decoder=bool(decoder),
        encoder=bool(encoder),
    )

    try:
        runner.start(path, watch=watch)
    except KeyboardInterrupt:
        log.info("Interrupted", path=str(path))
    except (HashError, OSError) as e:
        log.error("Run failed", error=str(e), path=str(path))
        perr(f"❌ {e}")
        raise click.Abort() from e


# #️⃣🔚
