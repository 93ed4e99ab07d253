"""Running external commands.

Commands run without a shell, with stdin closed and output captured. A
command that cannot be started, or that outlives its timeout, comes back as
an unsuccessful :class:`CommandResult` instead of an exception.
"""

import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_TIMEOUT_MS: int = 30000  # 30 seconds


@dataclass(frozen=True, slots=True)
class CommandConfig:
    """What to run and how.

    Attributes:
        args: Program followed by its arguments.
        cwd: Working directory, or None to inherit.
        env: Variables added to (or replacing) the inherited environment.
        timeout_ms: Wall-clock limit in milliseconds; 0 disables it.
    """

    args: tuple[str, ...] = ()
    cwd: str | Path | None = None
    env: dict[str, str] = field(default_factory=dict)
    timeout_ms: int = DEFAULT_TIMEOUT_MS


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of :func:`run_command`.

    ``success`` only says the process ran and exited; check ``exit_code`` for
    what it reported.

    Attributes:
        success: The process started and exited within the timeout.
        exit_code: Exit status, None when the process never finished.
        stdout: Captured standard output (UTF-8, invalid bytes replaced).
        stderr: Captured standard error (UTF-8, invalid bytes replaced).
        error: Why the command failed, when it did.
        timed_out: The timeout expired and the process was killed.
        command_not_found: The program does not exist.
    """

    success: bool
    exit_code: int | None = None
    stdout: str = ""
    stderr: str = ""
    error: str | None = None
    timed_out: bool = False
    command_not_found: bool = False


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def run_command(config: CommandConfig) -> CommandResult:
    """Run a command to completion and capture its output."""
    if not config.args:
        return CommandResult(success=False, error="No command specified")

    timeout = config.timeout_ms / 1000.0 if config.timeout_ms > 0 else None

    try:
        # On timeout, subprocess.run kills the child before raising
        completed = subprocess.run(  # noqa: S603
            list(config.args),
            cwd=str(config.cwd) if config.cwd else None,
            env={**os.environ, **config.env},
            stdin=subprocess.DEVNULL,
            capture_output=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        return CommandResult(
            success=False,
            error=f"Command timed out after {timeout}s",
            timed_out=True,
        )
    except FileNotFoundError as e:
        return CommandResult(success=False, error=str(e), command_not_found=True)
    except OSError as e:
        return CommandResult(success=False, error=str(e))

    return CommandResult(
        success=True,
        exit_code=completed.returncode,
        stdout=_decode(completed.stdout),
        stderr=_decode(completed.stderr),
    )
