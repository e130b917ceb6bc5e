"""External command execution with soft-failure semantics.

Commands run synchronously and report captured stdout lines. Launch errors,
timeouts, and non-zero exits all collapse to ``None`` so callers can treat
them as "absent" rather than as exceptions.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0

RunCommand = Callable[..., list[str] | None]


def run_lines(
    argv: Sequence[str],
    cwd: Path | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> list[str] | None:
    """Run ``argv`` and return non-empty stdout lines, or ``None`` on failure."""
    try:
        proc = subprocess.run(
            list(argv),
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("command %s failed to run: %s", argv[0] if argv else "?", exc)
        return None
    if proc.returncode != 0:
        logger.debug("command %s exited with %d", argv[0], proc.returncode)
        return None
    return [line.rstrip("\r") for line in proc.stdout.splitlines() if line.strip()]
