"""a11y_demos

Demonstration runs of the Pa11y accessibility checker against local HTML
fixtures.

Primary entrypoints:
 - cli.py (Typer CLI)
 - runner.py (Check Runner: run one check, report or fail)
 - node_bridge.py (pa11y subprocess invocation)
 - report.py (command line results rendering)
"""

__all__ = [
    "demos",
    "node_bridge",
    "report",
    "runner",
]
