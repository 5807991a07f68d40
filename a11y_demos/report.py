"""Command line rendering of Pa11y results."""
from typing import Any, Callable, List, Tuple

import typer
from jinja2 import Template

from .schema import RunResult

TEMPLATE = """
Results for URL: {{ target_label }}
{% if issues %}
{% for issue in issues %}

 • {{ issue.type|capitalize }}: {{ issue.message }}
   ├── {{ issue.code }}
   ├── {{ issue.selector or '' }}
   └── {{ issue.context or '' }}
{% endfor %}

{% for label, count in totals %}
{{ count }} {{ label }}
{% endfor %}
{% else %}

No issues found!
{% endif %}
"""

_TOTAL_LABELS = [("error", "Errors"), ("warning", "Warnings"), ("notice", "Notices")]


def issue_totals(run_result: RunResult) -> List[Tuple[str, int]]:
    """Return (label, count) for each issue type that occurs, in severity order."""
    totals = []
    for issue_type, label in _TOTAL_LABELS:
        count = sum(1 for i in run_result.issues if i.type == issue_type)
        if count:
            totals.append((label, count))
    return totals


def render_results(run_result: RunResult, target_label: str) -> str:
    text = Template(TEMPLATE, trim_blocks=True, lstrip_blocks=True).render(
        target_label=target_label,
        issues=run_result.issues,
        totals=issue_totals(run_result),
    )
    return text.rstrip()


class CliReporter:
    def __init__(self, echo: Callable[[str], Any] = typer.echo):
        self.echo = echo

    def results(self, run_result: RunResult, target_label: str) -> None:
        self.echo(render_results(run_result, target_label))
