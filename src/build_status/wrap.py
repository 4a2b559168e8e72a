"""Run a command between a pending and a terminal commit status."""

from build_status import config as config_mod
from build_status import log, process, status
from build_status.config import Config
from build_status.status import State


def classify(outcome: process.ExecutionOutcome) -> State:
    """Map how the command ended onto the terminal commit status."""
    if isinstance(outcome, process.Succeeded):
        return State.SUCCESS
    if isinstance(outcome, process.FailedToStart):
        return State.ERROR
    return State.FAILURE


def _exit_code(outcome: process.ExecutionOutcome) -> int:
    return 0 if isinstance(outcome, process.Succeeded) else 1


def _run(command: list[str]) -> process.ExecutionOutcome:
    log.group(" ".join(command))
    try:
        return process.run_streaming(command)
    finally:
        log.endgroup()


def _report(url: str, config: Config, state: State) -> bool:
    try:
        status.report(url, config, state)
    except status.ReportError as e:
        log.error(str(e))
        return False
    log.status(state.value, config.context)
    return True


def bypass(command: list[str]) -> int:
    """Run the command with no validation and no status reporting."""
    return _exit_code(_run(command))


def wrap(config: Config, command: list[str]) -> int:
    """Report pending, run the command, report its outcome.

    Returns exit code (0=success, 1=failure).
    """
    if config.bypass:
        return bypass(command)

    try:
        config_mod.validate(config)
    except config_mod.MissingConfiguration as e:
        log.error(str(e))
        return 1

    url = status.statuses_url(config.api_url, config.org_repo, config.sha)

    # The command must never run without a visible pending status first
    if not _report(url, config, State.PENDING):
        return 1

    outcome = _run(command)
    state = classify(outcome)

    # A failed terminal report exits 1 even if the command succeeded
    if not _report(url, config, state):
        return 1

    if isinstance(outcome, process.FailedToStart):
        log.error(f"executing command {command[0]} with args {command[1:]!r}: {outcome.reason}")
    elif isinstance(outcome, process.FailedWithExitCode):
        log.error(f"{command[0]} exited with code {outcome.returncode}")

    return _exit_code(outcome)
