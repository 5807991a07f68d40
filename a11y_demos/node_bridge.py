"""Bridge for invoking the Node-based Pa11y command line runner.

The API is intentionally small: ``Pa11yChecker.evaluate`` checks a single
target URL and returns either a ``RunResult`` parsed from Pa11y's JSON
reporter or a ``RunError`` describing why the check could not complete.
"""
from __future__ import annotations

import asyncio
import os
import time
from typing import List, Optional

import orjson
from pydantic import ValidationError

from .schema import CheckOutcome, RunConfiguration, RunError, RunResult

DEFAULT_EXECUTABLE = "pa11y"


def pa11y_executable() -> str:
    return os.environ.get("PA11Y_BIN") or DEFAULT_EXECUTABLE


def build_args(target: str, config: RunConfiguration, executable: Optional[str] = None) -> List[str]:
    # --level none keeps the exit code at 0 when issues are found, so any
    # non-zero exit means the check itself failed.
    args = [executable or pa11y_executable(), "--reporter", "json", "--level", "none"]
    for rule in config.ignore:
        args.extend(["--ignore", rule])
    args.append(target)
    return args


def error_message(stderr: str, returncode: int) -> str:
    """Return the first meaningful stderr line, without Node's ``Error: `` prefix."""
    for line in stderr.splitlines():
        line = line.strip()
        if not line:
            continue
        if line.startswith("Error: "):
            line = line[len("Error: "):]
        return line
    return f"Pa11y exited with code {returncode}"


class Pa11yChecker:
    """Accessibility Checker backed by the ``pa11y`` executable."""

    def __init__(self, executable: Optional[str] = None):
        self.executable = executable

    async def evaluate(self, target: str, config: RunConfiguration) -> CheckOutcome:
        args = build_args(target, config, self.executable)
        config.log.debug(f"Command: {' '.join(args)}")
        config.log.info(f"Running Pa11y on URL {target}")
        start = time.time()
        try:
            proc = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            return RunError(message=f"Failed to start {args[0]}: {e}")
        stdout, stderr = await proc.communicate()
        duration = time.time() - start

        err_text = stderr.decode("utf-8", errors="replace")
        sink = config.log.error if proc.returncode != 0 else config.log.debug
        for line in err_text.splitlines():
            if line.strip():
                sink(line)
        if proc.returncode != 0:
            return RunError(message=error_message(err_text, proc.returncode))

        try:
            data = orjson.loads(stdout)
        except orjson.JSONDecodeError as e:
            return RunError(message=f"Failed reading JSON output: {e}")
        # The json reporter prints only the issue list for a single URL.
        if isinstance(data, list):
            data = {"pageUrl": target, "issues": data}
        try:
            result = RunResult.model_validate(data)
        except ValidationError as e:
            return RunError(message=f"Unexpected Pa11y output: {e}")
        config.log.debug(f"Pa11y finished in {duration:.2f}s")
        return result
