#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Removable media mount watching.

Mounted partitions are polled with psutil. A mount event is emitted each time
the watched mount point goes from absent to present in the partition table.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
import math
import os
import threading
import time

from provide.foundation import logger
import psutil

from hashrun.config.defaults import DEFAULT_MOUNT_DEBOUNCE, DEFAULT_POLL_INTERVAL


def mounted_points() -> set[str]:
    """Return the mount points of every mounted partition."""
    return {part.mountpoint for part in psutil.disk_partitions(all=True)}


class MountWatcher:
    """Watches a single mount point for new mounts."""

    def __init__(
        self,
        mount_point: str,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        debounce: float = DEFAULT_MOUNT_DEBOUNCE,
        scan: Callable[[], set[str]] = mounted_points,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.mount_point = os.path.normpath(mount_point)
        self.poll_interval = poll_interval
        self.debounce = debounce
        self._scan = scan
        self._clock = clock
        self._stopped = threading.Event()
        self._last_event: float | None = None

    def stop(self) -> None:
        """Stop the watcher; a running ``events()`` loop ends after its current poll."""
        self._stopped.set()

    @property
    def stopped(self) -> bool:
        return self._stopped.is_set()

    def _is_mounted(self) -> bool:
        return self.mount_point in {os.path.normpath(p) for p in self._scan()}

    def _accept(self, timestamp: float) -> bool:
        """Debounce on whole elapsed seconds.

        An event is accepted only when the elapsed time since the last accepted
        event, truncated to whole seconds, exceeds ``debounce``.
        """
        if self._last_event is not None and math.floor(timestamp - self._last_event) <= self.debounce:
            logger.debug(f"🔕 Ignoring mount event for {self.mount_point} (debounced)")
            return False
        self._last_event = timestamp
        return True

    def events(self) -> Iterator[float]:
        """Yield a monotonic timestamp for every new mount of the watched point.

        A mount point that is already mounted when watching starts produces
        an initial event.
        """
        logger.info(f"👀 Watching {self.mount_point} for removable media")
        was_mounted = False

        while not self._stopped.is_set():
            mounted = self._is_mounted()
            if mounted and not was_mounted:
                timestamp = self._clock()
                logger.debug(f"💾 Detected mount at {self.mount_point}")
                if self._accept(timestamp):
                    yield timestamp
            elif was_mounted and not mounted:
                logger.debug(f"⏏️ {self.mount_point} unmounted")
            was_mounted = mounted

            self._stopped.wait(self.poll_interval)

        logger.info(f"🛑 Stopped watching {self.mount_point}")


# #️⃣🔚
