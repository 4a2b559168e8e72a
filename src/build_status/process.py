"""Subprocess wrapper — the single mock seam for all tests."""

import subprocess
from dataclasses import dataclass


@dataclass(frozen=True)
class Succeeded:
    returncode: int = 0


@dataclass(frozen=True)
class FailedWithExitCode:
    returncode: int


@dataclass(frozen=True)
class FailedToStart:
    reason: str


ExecutionOutcome = Succeeded | FailedWithExitCode | FailedToStart


def run_streaming(args: list[str]) -> ExecutionOutcome:
    """Run a command with inherited stdin/stdout/stderr and classify how it ended.

    Blocks until the child exits. A command that cannot be launched at all
    (not found, not executable, permission denied) is FailedToStart, never
    a non-zero exit. Death by signal shows up as a negative returncode.
    """
    try:
        proc = subprocess.run(args)
    except OSError as e:
        return FailedToStart(reason=e.strerror or str(e))

    if proc.returncode == 0:
        return Succeeded()
    return FailedWithExitCode(returncode=proc.returncode)
