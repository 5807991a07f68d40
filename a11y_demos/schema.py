from pydantic import BaseModel, ConfigDict
from typing import Any, Callable, Dict, List, Optional, Tuple, Union


class LogSinks(BaseModel):
    """Diagnostic callbacks the checker may call during evaluation."""
    model_config = ConfigDict(frozen=True)

    debug: Callable[[str], Any]
    error: Callable[[str], Any]
    info: Callable[[str], Any]


class RunConfiguration(BaseModel):
    model_config = ConfigDict(frozen=True)

    log: LogSinks
    # Order and duplicates are kept; () means "no ignores", never omitted.
    ignore: Tuple[str, ...] = ()


class Pa11yIssue(BaseModel):
    code: str
    type: str  # error|warning|notice
    typeCode: Optional[int] = None
    message: str
    context: Optional[str] = None
    selector: Optional[str] = None
    runner: Optional[str] = None
    runnerExtras: Dict[str, Any] = {}


class RunResult(BaseModel):
    documentTitle: Optional[str] = None
    pageUrl: str
    issues: List[Pa11yIssue] = []


class RunError(BaseModel):
    message: str


# Exactly one of these is produced per run.
CheckOutcome = Union[RunResult, RunError]


class Demo(BaseModel):
    """An inline demonstration run: one fixture checked under one ignore list."""
    model_config = ConfigDict(frozen=True)

    name: str
    fixture: str
    ignore: Tuple[str, ...] = ()
    description: str = ""
