"""Shared utility functions for forge.

Provides async command execution, toolchain checks and small file-system and
formatting helpers.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    passthrough_stdout: bool = False,
) -> tuple[int, str, str]:
    """Run a command asynchronously and wait for it to exit.

    Args:
        cmd: List of arguments; the first item is the executable.
        cwd: Working directory for the child process.
        passthrough_stdout: Let stdout inherit the parent's stream while
            stderr is still captured.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  A passed-through stdout
        comes back as an empty string.

    Raises:
        FileNotFoundError: If the executable does not exist.
        asyncio.CancelledError: If the calling task is cancelled.  The child
            process is killed and reaped before the error propagates.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=None if passthrough_stdout else asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
    )

    try:
        stdout_bytes, stderr_bytes = await process.communicate()
    except asyncio.CancelledError:
        if process.returncode is None:
            process.kill()
        await process.wait()
        raise

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# Toolchain checks
# ---------------------------------------------------------------------------


async def check_toolchain(executable: str, version_args: list[str]) -> bool:
    """Return ``True`` if *executable* is on ``PATH`` and its version command exits 0."""
    if shutil.which(executable) is None:
        return False
    try:
        returncode, _, _ = await run_command([executable, *version_args])
    except OSError:
        return False
    return returncode == 0


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def is_empty_dir(path: str | Path) -> bool:
    """Return ``True`` if *path* is a directory with no entries."""
    dir_path = Path(path)
    return dir_path.is_dir() and next(dir_path.iterdir(), None) is None


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
        format_duration(3661.0) -> "1h 1m 1s"
    """
    if seconds < 0:
        return "0.0s"

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = seconds % 60

    parts: list[str] = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")

    if hours > 0 or minutes > 0:
        parts.append(f"{int(secs)}s")
    else:
        parts.append(f"{secs:.1f}s")

    return " ".join(parts)
