"""
Command line interface for the fullstack scaffolding orchestrator.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import (
    ConfigError,
    ScaffoldConfig,
    Workflow,
    apply_env_overrides,
    load_config,
    resolve_package_manager,
    resolve_workflow,
)
from .errors import ScaffoldError
from .process import DryRunRunner, Runner
from .workflow import Orchestrator, Prompter, StepStatus, WorkflowState

console = Console()
app = typer.Typer(help="Scaffold a Vite frontend and/or an Express backend with npm or bun.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]

_STATUS_STYLES = {
    StepStatus.SUCCESS: "green",
    StepStatus.FAILURE: "bold red",
    StepStatus.SKIPPED: "dim",
}


def _configure_logging(level_name: str) -> None:
    env_override = os.getenv("FULLSTACK_CLI_LOG_LEVEL")
    level_str = (env_override or level_name or "warning").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "WARNING"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _resolve_config_path(value: Optional[Path]) -> Optional[Path]:
    """Ensure an explicitly supplied config path exists and return it absolute."""
    if value is None:
        return None
    resolved = value.expanduser().resolve()
    if not resolved.exists():
        raise typer.BadParameter(f"No config file found at {resolved}")
    if not resolved.is_file():
        raise typer.BadParameter(f"Config path must be a file, got directory: {resolved}")
    return resolved


def _load_config_or_exit(path: Optional[Path]) -> ScaffoldConfig:
    try:
        config = load_config(path) if path else ScaffoldConfig()
        return apply_env_overrides(config)
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _print_summary(state: WorkflowState) -> None:
    table = Table(title="Scaffold Summary")
    table.add_column("Step")
    table.add_column("Status")
    table.add_column("Details", overflow="fold")
    for step, status, message in state.summary_rows():
        style = _STATUS_STYLES.get(StepStatus(status), "")
        table.add_row(step, f"[{style}]{status}[/]" if style else status, escape(message))
    console.print(table)


def _run_workflow(
    workflow: Workflow,
    *,
    package_manager: Optional[str],
    config_path: Optional[Path],
    dry_run: bool,
) -> None:
    config = _load_config_or_exit(config_path)
    prompter = Prompter(console)
    state: Optional[WorkflowState] = None
    try:
        raw_choice = package_manager or config.package_manager
        if raw_choice is None:
            raw_choice = prompter.ask("Do you want to use npm or bun? (npm/bun):")
        state = WorkflowState(package_manager=resolve_package_manager(raw_choice))
        logger.info("Using %s for the %s workflow", state.package_manager.value, workflow.value)
        runner = DryRunRunner(console) if dry_run else Runner()
        orchestrator = Orchestrator(
            state,
            config=config,
            runner=runner,
            prompter=prompter,
            console=console,
            dry_run=dry_run,
        )
        orchestrator.execute(workflow)
    except ScaffoldError as exc:
        if state is not None and state.outcomes:
            _print_summary(state)
        console.print(f"[bold red]{escape(str(exc))}[/]", highlight=False)
        raise typer.Exit(code=1) from exc

    _print_summary(state)
    if dry_run:
        console.print("[bold blue]Dry run complete.[/] No commands were executed.")
    else:
        console.print(f"[bold green]{workflow.value.capitalize()} project created successfully![/]")


def _package_manager_option() -> Any:
    return typer.Option(
        None,
        "--package-manager",
        "-p",
        help="npm or bun; asked interactively when omitted.",
    )


def _config_option() -> Any:
    return typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a TOML configuration file.",
        callback=_resolve_config_path,
    )


def _dry_run_option() -> Any:
    return typer.Option(
        False,
        "--dry-run",
        help="Print the commands instead of running them.",
    )


def _run_from_context(
    ctx: typer.Context,
    workflow: Workflow,
    package_manager: Optional[str],
    config: Optional[Path],
    dry_run: bool,
) -> None:
    """Run a workflow, falling back to options given before the subcommand."""
    root = ctx.obj or {}
    _run_workflow(
        workflow,
        package_manager=package_manager or root.get("package_manager"),
        config_path=config or root.get("config"),
        dry_run=dry_run or root.get("dry_run", False),
    )


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show fullstack-cli version and exit.",
        is_flag=True,
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
    package_manager: Optional[str] = _package_manager_option(),
    config: Optional[Path] = _config_option(),
    dry_run: bool = _dry_run_option(),
) -> None:
    """
    Default command when no subcommand is selected.

    Asks which workflow to run, then runs it interactively. The package
    manager, config and dry-run options also apply to a following subcommand.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]fullstack-cli[/] {__version__}")
        raise typer.Exit()

    ctx.obj = {"package_manager": package_manager, "config": config, "dry_run": dry_run}
    if ctx.invoked_subcommand is None:
        answer = Prompter(console).ask("Do you want to set up the frontend, backend or fullstack?")
        try:
            workflow = resolve_workflow(answer)
        except ScaffoldError as exc:
            console.print(f"[bold red]{escape(str(exc))}[/]", highlight=False)
            raise typer.Exit(code=1) from exc
        _run_workflow(workflow, package_manager=package_manager, config_path=config, dry_run=dry_run)


@app.command()
def frontend(
    ctx: typer.Context,
    package_manager: Optional[str] = _package_manager_option(),
    config: Optional[Path] = _config_option(),
    dry_run: bool = _dry_run_option(),
) -> None:
    """
    Create a Vite project and optionally add Tailwind CSS, DaisyUI, react-router-dom and axios.
    """
    _run_from_context(ctx, Workflow.FRONTEND, package_manager, config, dry_run)


@app.command()
def backend(
    ctx: typer.Context,
    package_manager: Optional[str] = _package_manager_option(),
    config: Optional[Path] = _config_option(),
    dry_run: bool = _dry_run_option(),
) -> None:
    """
    Create a backend folder and optionally add Express, an auth SDK, a database compose file and Prisma.
    """
    _run_from_context(ctx, Workflow.BACKEND, package_manager, config, dry_run)


@app.command()
def fullstack(
    ctx: typer.Context,
    package_manager: Optional[str] = _package_manager_option(),
    config: Optional[Path] = _config_option(),
    dry_run: bool = _dry_run_option(),
) -> None:
    """
    Set up the backend, then the frontend next to it.
    """
    _run_from_context(ctx, Workflow.FULLSTACK, package_manager, config, dry_run)


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
