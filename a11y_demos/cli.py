"""Typer CLI for running the Pa11y demonstrations."""
import asyncio
from functools import partial
from pathlib import Path

import typer

from . import demos, node_bridge
from .report import CliReporter
from .runner import CheckRunner
from .schema import Demo, LogSinks

# loading variables (e.g. PA11Y_BIN) from .env file
from dotenv import load_dotenv
load_dotenv()

app = typer.Typer(add_completion=False)


def console_sinks() -> LogSinks:
    return LogSinks(
        debug=typer.echo,
        error=partial(typer.echo, err=True),
        info=typer.echo,
    )


def _check(demo: Demo, cwd: Path):
    target = demos.fixture_url(cwd, demo.fixture)
    runner = CheckRunner(node_bridge.Pa11yChecker(), CliReporter())
    return runner.run(target, demo.ignore, console_sinks())


@app.command()
def run(demo: str = typer.Argument("basic", help="Demo to run (see `list`).")):
    """Run one demo against its local fixture and print the results."""
    try:
        selected = demos.get_demo(demo)
    except KeyError as e:
        raise typer.BadParameter(e.args[0], param_hint="DEMO")
    asyncio.run(_check(selected, Path.cwd()))


@app.command("run-all")
def run_all():
    """Run every demo; runs are independent and their output may interleave."""
    cwd = Path.cwd()

    async def _batch():
        await asyncio.gather(*(_check(d, cwd) for d in demos.DEMOS.values()))

    asyncio.run(_batch())


@app.command("list")
def list_demos():
    """List the available demos."""
    for d in demos.DEMOS.values():
        typer.echo(f"{d.name}: {demos.FIXTURE_DIR}/{d.fixture} ignore={list(d.ignore)}")
        if d.description:
            typer.echo(f"  {d.description}")


def main():  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
