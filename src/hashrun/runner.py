#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Script runner: evaluates autorun scripts and records each run on disk."""

from __future__ import annotations

from collections.abc import Callable
import contextlib
import datetime
import os
from pathlib import Path
import subprocess
import sys

from provide.foundation import logger
from provide.foundation.errors import ProcessError
from provide.foundation.file import atomic_write
from provide.foundation.process import run

from hashrun.config.defaults import (
    DEFAULT_POLL_INTERVAL,
    ENV_DECODER,
    ENV_ENCODER,
    ENV_HOST,
    ENV_RUN_DIR,
    ENV_SCRIPT,
    ERROR_LOG,
    HIDDEN_PREFIX,
    MAX_SCRIPT_SIZE,
    RUN_DIR_INFIX,
    RUN_DIR_TIME_FORMAT,
    SCRIPT_SHELL,
    STDERR_LOG,
    STDOUT_LOG,
)
from hashrun.exceptions import ScriptExecutionError, UnsupportedScriptError
from hashrun.script import Script
from hashrun.transform import as_bytes, transform


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class Runner:
    """Evaluates ``*.ha.sh`` scripts from a file, a directory, or a watched mount point."""

    def __init__(
        self,
        host_id: str,
        decoder: str | None = None,
        encoder: str | None = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        now: Callable[[], datetime.datetime] = utc_now,
    ) -> None:
        """Initialize the runner.

        Args:
            host_id: Host identifier exported to scripts as HASH_HOST
            decoder: Shell filter applied to script bytes before execution
            encoder: Shell filter applied to captured stdout/stderr
            poll_interval: Seconds between partition scans in watch mode
            now: Clock used to name run directories
        """
        self.host_id = host_id
        self.decoder = decoder or None
        self.encoder = encoder or None
        self.poll_interval = poll_interval
        self._now = now

    def start(self, path: Path, watch: bool = False) -> None:
        """Evaluate a script file, a directory, or watch a mount point.

        A single file is evaluated and its errors propagate. A directory is
        evaluated once, or, with ``watch``, every time media is mounted on it.
        Watching blocks until interrupted.
        """
        if path.is_file():
            self.eval_script(path, wait=True)
        elif not watch:
            self.eval_dir(path, wait=True)
        else:
            self.watch(path)

    def watch(self, mount_point: Path) -> None:
        """Evaluate ``mount_point`` in detached mode on every debounced mount."""
        if not sys.platform.startswith("linux"):
            logger.warning("⚠️ Mount watching is only supported on Linux")

        from hashrun.watcher import MountWatcher

        watcher = MountWatcher(str(mount_point), poll_interval=self.poll_interval)
        try:
            for _ in watcher.events():
                try:
                    self.eval_dir(mount_point, wait=False)
                except OSError as e:
                    logger.error(f"❌ Failed to evaluate {mount_point}: {e}")
        finally:
            watcher.stop()

    def eval_dir(self, directory: Path, wait: bool) -> None:
        """Evaluate every non-hidden entry of ``directory``.

        Errors for individual entries are logged and skipped. Failing to list
        the directory raises ``OSError``.
        """
        entries = sorted(
            entry for entry in directory.iterdir() if not entry.name.startswith(HIDDEN_PREFIX)
        )
        logger.debug(f"📂 Evaluating {len(entries)} entries in {directory}")

        for entry in entries:
            try:
                self.eval_script(entry, wait)
            except Exception as e:
                logger.warning(f"⚠️ Script evaluation error: {e}")

    def eval_script(self, path: Path, wait: bool) -> Path:
        """Validate and run one script inside a fresh run directory.

        Validation and run directory creation errors propagate. Errors raised
        while running are written to ``error.log`` in the run directory.

        Returns:
            Path: The run directory
        """
        script = Script.from_file(path)
        run_dir = self.run_dir_for(script)
        run_dir.mkdir()
        logger.info(f"🏃 Running {script.name} in {run_dir}")

        try:
            self.run(script, run_dir, wait)
        except Exception as e:
            logger.error(f"❌ Script {script.name} failed: {e}")
            self._write_error(run_dir, e)

        return run_dir

    def run_dir_for(self, script: Script) -> Path:
        timestamp = self._now().strftime(RUN_DIR_TIME_FORMAT)
        return script.parent / f"{script.name}{RUN_DIR_INFIX}{timestamp}"

    def prepare_environment(self, script: Script, run_dir: Path) -> dict[str, str]:
        """Inherited environment plus the HASH_* variables for a script run."""
        env = dict(os.environ)
        env.update(
            {
                ENV_HOST: self.host_id,
                ENV_DECODER: self.decoder or "",
                ENV_ENCODER: self.encoder or "",
                ENV_SCRIPT: script.name,
                ENV_RUN_DIR: str(run_dir),
            }
        )
        return env

    def load_script_text(self, script: Script) -> str:
        """Read, size-check and decode a script into shell source text."""
        if script.size() > MAX_SCRIPT_SIZE:
            raise UnsupportedScriptError(script.path)

        decoded = transform(script.read_bytes(), self.decoder)
        try:
            return decoded.decode("utf-8")
        except UnicodeDecodeError as e:
            raise UnsupportedScriptError(script.path) from e

    def run(self, script: Script, run_dir: Path, wait: bool) -> None:
        """Execute a script with ``sh -s`` from its own directory.

        The decoded script is fed on stdin so it never appears in argv or in
        error messages. In wait mode stdout and stderr are captured, passed
        through the encoder and written to the run directory when non-empty.
        Otherwise the shell is spawned and left running. The script's exit
        status is not checked.

        Raises:
            ScriptExecutionError: If the shell cannot be started
        """
        source = self.load_script_text(script).encode("utf-8")
        env = self.prepare_environment(script, run_dir)
        command = [SCRIPT_SHELL, "-s"]

        if not wait:
            self._spawn(script, command, source, env)
            return

        try:
            result = run(
                command,
                cwd=script.parent,
                env=env,
                input=source,
                capture_output=True,
                text=False,
                check=False,
            )
        except ProcessError as e:
            reason = str(e.__cause__) if e.__cause__ is not None else "shell could not be started"
            raise ScriptExecutionError(script.path, reason) from None

        if result.returncode != 0:
            logger.info(f"ℹ️ {script.name} exited with code {result.returncode}")

        self._write_output(run_dir / STDOUT_LOG, as_bytes(result.stdout))
        self._write_output(run_dir / STDERR_LOG, as_bytes(result.stderr))

    def _spawn(self, script: Script, command: list[str], source: bytes, env: dict[str, str]) -> None:
        try:
            process = subprocess.Popen(command, cwd=script.parent, env=env, stdin=subprocess.PIPE)
        except OSError as e:
            raise ScriptExecutionError(script.path, str(e)) from None

        logger.debug(f"🚀 Spawned {script.name} (pid {process.pid})")
        stdin = process.stdin
        assert stdin is not None
        try:
            stdin.write(source)
        except BrokenPipeError:
            logger.debug(f"🔌 {script.name} closed stdin early")
        finally:
            with contextlib.suppress(BrokenPipeError):
                stdin.close()

    def _write_output(self, path: Path, output: bytes) -> None:
        if not output:
            return
        atomic_write(path, transform(output, self.encoder))
        logger.debug(f"📝 Wrote {path}")

    def _write_error(self, run_dir: Path, error: Exception) -> None:
        try:
            (run_dir / ERROR_LOG).write_text(str(error))
        except OSError as e:
            logger.warning(f"⚠️ Could not write {ERROR_LOG} in {run_dir}: {e}")


# #️⃣🔚
