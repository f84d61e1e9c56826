#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""hash command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from hashrun.commands.install import install_command
from hashrun.commands.run import run_command
from hashrun.config import HashRuntimeConfig

__version__ = get_version("hash-autorun", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="hash",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Headless autorun.

    Configure logging via environment variables:
    - HASH_LOG_LEVEL: Set log level for hash (trace, debug, info, warning, error)
    - HASH_SETUP_LOG_LEVEL: Control Foundation's initialization logs
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    hash_config = HashRuntimeConfig.from_env()
    cli_ctx = CLIContext.from_env()
    base_telemetry = TelemetryConfig.from_env()

    telemetry_config = evolve(
        base_telemetry,
        service_name="hash",
        logging=evolve(
            base_telemetry.logging,
            default_level=hash_config.log_level,  # type: ignore[arg-type]
            foundation_setup_log_level=hash_config.setup_log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(run_command, name="run")
cli.add_command(install_command, name="install")

main = cli

if __name__ == "__main__":
    cli()

# #️⃣🔚
