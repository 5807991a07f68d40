"""Check Runner: run one accessibility check and report or fail."""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterable, Protocol

import typer

from .schema import CheckOutcome, LogSinks, RunConfiguration, RunError, RunResult


class AccessibilityChecker(Protocol):
    async def evaluate(self, target: str, config: RunConfiguration) -> CheckOutcome:
        ...


class Reporter(Protocol):
    def results(self, run_result: RunResult, target_label: str) -> None:
        ...


class RunState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    FAILED = "failed"
    REPORTED = "reported"


def build_config(ignore: Iterable[str], log: LogSinks) -> RunConfiguration:
    return RunConfiguration(log=log, ignore=tuple(ignore))


class CheckRunner:
    """Executes exactly one check against one target.

    ``echo`` receives the failure line; it defaults to stdout via ``typer.echo``.
    Reporter failures are not caught.
    """

    def __init__(
        self,
        checker: AccessibilityChecker,
        reporter: Reporter,
        echo: Callable[[str], Any] = typer.echo,
    ):
        self.checker = checker
        self.reporter = reporter
        self.echo = echo
        self.state = RunState.IDLE

    async def run(self, target: str, ignore: Iterable[str], log: LogSinks) -> CheckOutcome:
        if self.state is not RunState.IDLE:
            raise RuntimeError(f"CheckRunner already used (state={self.state.value})")
        if not target:
            raise ValueError("target must be a non-empty URL")
        config = build_config(ignore, log)
        self.state = RunState.RUNNING
        outcome = await self.checker.evaluate(target, config)
        if isinstance(outcome, RunError):
            self.state = RunState.FAILED
            self.echo(f"Ooops:{outcome.message}")
        elif isinstance(outcome, RunResult):
            self.state = RunState.REPORTED
            self.reporter.results(outcome, target)
        else:
            raise TypeError(f"Checker returned {type(outcome).__name__}, expected RunResult or RunError")
        return outcome
