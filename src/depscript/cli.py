"""
depscript command line.

Compile a script to its shell commands, or compile and run them in order.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from .config import Settings, load_settings
from .errors import CommandError, DepscriptError
from .loader import load
from .plan import Plan

app = typer.Typer(help="Compile and run depscript dependency-setup scripts.")

ScriptArg = Annotated[Path, typer.Argument(help="Script file to interpret.", exists=True, dir_okay=False)]
ConfigOpt = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="HCL settings file.", exists=True, dir_okay=False),
]
VarOpt = Annotated[
    list[str] | None,
    typer.Option("--var", "-V", help="Preset a script variable (NAME=VALUE)."),
]
DefineOpt = Annotated[
    list[str] | None,
    typer.Option(
        "--define", "-D", help="Render the script as a Jinja2 template with this value (KEY=VALUE)."
    ),
]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")]


def _parse_pairs(pairs: list[str] | None, option: str) -> dict[str, str]:
    result: dict[str, str] = {}
    for pair in pairs or []:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise typer.BadParameter(f"expected NAME=VALUE, got '{pair}'", param_hint=option)
        result[name] = value
    return result


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _compile(
    script: Path,
    config: Path | None,
    var: list[str] | None,
    define: list[str] | None,
) -> tuple[Plan, Settings]:
    variables = _parse_pairs(var, "--var")
    context = _parse_pairs(define, "--define") if define else None
    try:
        settings = load_settings(config) if config is not None else Settings()
        plan = load(script, context=context, settings=settings, variables=variables)
    except DepscriptError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    return plan, settings


@app.command("compile")
def compile_cmd(
    script: ScriptArg,
    config: ConfigOpt = None,
    var: VarOpt = None,
    define: DefineOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Print the commands a script compiles to, one per line."""
    _setup_logging(verbose)
    plan, _ = _compile(script, config, var, define)
    for command in plan:
        typer.echo(command)


@app.command("run")
def run_cmd(
    script: ScriptArg,
    config: ConfigOpt = None,
    var: VarOpt = None,
    define: DefineOpt = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Log commands without running them.")] = False,
    keep_going: Annotated[
        bool, typer.Option("--keep-going", "-k", help="Continue after a command fails.")
    ] = False,
    verbose: VerboseOpt = False,
) -> None:
    """Compile a script and run its commands in order."""
    _setup_logging(verbose)
    plan, settings = _compile(script, config, var, define)
    try:
        failed = plan.execute(dry_run=dry_run, keep_going=keep_going, shell=settings.shell)
    except CommandError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    if failed:
        typer.echo(f"{len(failed)} command(s) failed", err=True)
        raise typer.Exit(code=1)
