"""Inline registry of demonstration runs against the local fixtures."""
from os import PathLike
from typing import Dict, Union

from .schema import Demo

FIXTURE_DIR = "demos/local"

DEMOS: Dict[str, Demo] = {
    d.name: d
    for d in [
        Demo(
            name="basic",
            fixture="test.html",
            description="Check test.html with every rule enabled.",
        ),
        Demo(
            name="ignore-rules",
            fixture="test.html",
            ignore=(
                "WCAG2AA.Principle1.Guideline1_1.1_1_1.H37",
                "WCAG2AA.Principle3.Guideline3_1.3_1_1.H57.2",
            ),
            description="Check test.html with the missing alt text and lang rules ignored.",
        ),
        Demo(
            name="form-labels-ignored",
            fixture="form.html",
            ignore=("WCAG2AA.Principle1.Guideline1_3.1_3_1.F68",),
            description="Check form.html with the missing form field label rule ignored.",
        ),
    ]
}


def get_demo(name: str) -> Demo:
    try:
        return DEMOS[name]
    except KeyError:
        raise KeyError(f"Unknown demo '{name}'. Available: {', '.join(sorted(DEMOS))}") from None


def fixture_url(cwd: Union[str, "PathLike[str]"], fixture: str) -> str:
    """Return ``file://<cwd>/demos/local/<fixture>``."""
    return f"file://{cwd}/{FIXTURE_DIR}/{fixture}"
