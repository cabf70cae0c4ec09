"""Command line entry point: run or check an action file."""

import json
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
import yaml

from .errors import ActionCancelledError, ActionsLoadError, ScriptFailedError
from .loader import ActionLoader
from .log import configure_logging
from .runner import ActionRunner
from .schema import Action, ActionHook
from .scripts import ShellScriptAdapter
from .varbag import VarBag

app = typer.Typer(help="Run declarative actions: prompts, shell scripts and variables.")


class OutputFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"


def _parse_hook(value: str) -> ActionHook:
    try:
        return ActionHook(value)
    except ValueError:
        raise typer.BadParameter(f"unknown hook '{value}', expected before or after")


def _parse_vars(pairs: Optional[List[str]]) -> VarBag:
    varbag = {}
    for pair in pairs or []:
        if '=' not in pair:
            raise typer.BadParameter(f"expected KEY=VALUE, got '{pair}'", param_hint="--var")
        key, value = pair.split('=', 1)
        varbag[key] = value
    return varbag


def _load(file: Path) -> List[Action]:
    try:
        return ActionLoader().load(file)
    except ActionsLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)


@app.command()
def run(
    file: Path = typer.Argument(..., help="YAML or JSON file with a list of actions"),
    hook: str = typer.Option("after", help="Only run actions with this hook (before/after)"),
    cwd: Optional[Path] = typer.Option(None, help="Working directory for run scripts"),
    var: Optional[List[str]] = typer.Option(None, "--var", help="Preset variable as KEY=VALUE, repeatable"),
    output: OutputFormat = typer.Option(OutputFormat.YAML, "--format", help="How to print results"),
    log_level: str = typer.Option("WARNING", help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every command and its exit code"),
):
    """Run the actions in FILE, asking questions on the terminal."""
    configure_logging(log_level)

    selected_hook = _parse_hook(hook)
    varbag = _parse_vars(var)
    actions = _load(file)

    runner = ActionRunner(scripts=ShellScriptAdapter(verbose=verbose))
    try:
        results = runner.run(actions, cwd, varbag, selected_hook)
    except ActionCancelledError as e:
        typer.echo(f"Cancelled: {e}", err=True)
        raise typer.Exit(130)
    except ScriptFailedError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except (EOFError, KeyboardInterrupt):
        typer.echo("Aborted: no more input", err=True)
        raise typer.Exit(130)
    except OSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    report = {
        'results': [result.model_dump(mode='json') for result in results],
        'variables': varbag,
    }
    if output == OutputFormat.JSON:
        typer.echo(json.dumps(report, indent=2))
    else:
        typer.echo(yaml.safe_dump(report, sort_keys=False).rstrip())


@app.command()
def validate(file: Path = typer.Argument(..., help="YAML or JSON file with a list of actions")):
    """Check that FILE is a valid action list."""
    actions = _load(file)

    counts = {hook: 0 for hook in ActionHook}
    for action in actions:
        counts[action.hook] += 1

    summary = ", ".join(f"{hook.value}: {count}" for hook, count in counts.items())
    typer.echo(f"{len(actions)} actions ({summary})")


def main():
    app()
