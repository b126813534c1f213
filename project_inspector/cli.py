"""CLI entry point: project-inspect.

Subcommands:
    project-inspect info ./my-app            # config, dependencies, scripts
    project-inspect detect ./my-app --json   # framework / package manager / workspace
    project-inspect run ./my-app build       # delegate `<pm> run build`
    project-inspect install ./my-app         # delegate `<pm> install`
"""

from __future__ import annotations

import asyncio
import json
import sys
from dataclasses import replace

import click
from dotenv import find_dotenv, load_dotenv

from project_inspector.core.logging import setup_logging
from project_inspector.exceptions import CommandExecutionError, InspectorError
from project_inspector.inspector import ProjectInspector
from project_inspector.models.config import InspectorConfig
from project_inspector.models.project import ProjectInfo


def _make_inspector(ctx: click.Context) -> ProjectInspector:
    return ProjectInspector(config=ctx.obj["config"])


def _print_info(info: ProjectInfo) -> None:
    config = info.config
    click.echo(f"Name: {config.name}")
    click.echo(f"Root: {config.root}")
    click.echo(f"Framework: {config.type.value}")
    click.echo(f"Package manager: {config.package_manager.value}")
    click.echo(f"Workspace root: {'yes' if config.is_workspace_root else 'no'}")
    if config.workspace_patterns:
        click.echo(f"Workspace patterns: {', '.join(config.workspace_patterns)}")

    for label, deps in (("Dependencies", info.dependencies.prod),
                        ("Dev dependencies", info.dependencies.dev)):
        click.echo(f"\n{label} ({len(deps)}):")
        for name, version in sorted(deps.items()):
            click.echo(f"  {name} {version}")

    click.echo(f"\nScripts ({len(info.scripts)}):")
    for name, command in info.scripts.items():
        click.echo(f"  {name}: {command}")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Project Inspector: detect framework, package manager and workspace layout."""
    load_dotenv(find_dotenv(usecwd=True))
    config = InspectorConfig.from_env()
    if verbose:
        config = replace(config, verbose=True)
    setup_logging(verbose=config.verbose)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


@main.command("info")
@click.argument("root", type=click.Path(exists=True, file_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def info(ctx: click.Context, root: str, as_json: bool) -> None:
    """Show project config, dependencies and scripts."""
    inspector = _make_inspector(ctx)
    try:
        result = asyncio.run(inspector.get_project_info(root))
    except InspectorError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        _print_info(result)


@main.command("detect")
@click.argument("root", type=click.Path(exists=True, file_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def detect(ctx: click.Context, root: str, as_json: bool) -> None:
    """Run the detectors only. Works without a package.json."""
    inspector = _make_inspector(ctx)

    async def _detect() -> dict:
        kind, pm, workspace = await asyncio.gather(
            inspector.detect_framework_kind(root),
            inspector.detect_package_manager(root),
            inspector.is_workspace_root(root),
        )
        return {"framework": kind.value, "package_manager": pm.value, "is_workspace_root": workspace}

    result = asyncio.run(_detect())
    if as_json:
        click.echo(json.dumps(result, indent=2))
        return
    click.echo(f"Framework: {result['framework']}")
    click.echo(f"Package manager: {result['package_manager']}")
    click.echo(f"Workspace root: {'yes' if result['is_workspace_root'] else 'no'}")


def _exit_for(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    if isinstance(e, CommandExecutionError) and e.returncode:
        # A child killed by signal N reports -N; shells report 128+N
        code = e.returncode if e.returncode > 0 else 128 - e.returncode
        sys.exit(code)
    sys.exit(1)


@main.command("run")
@click.argument("root", type=click.Path(exists=True, file_okay=False))
@click.argument("script")
@click.pass_context
def run(ctx: click.Context, root: str, script: str) -> None:
    """Run a package.json script with the detected package manager."""
    inspector = _make_inspector(ctx)
    try:
        asyncio.run(inspector.run_script(root, script))
    except (InspectorError, ValueError) as e:
        _exit_for(e)


@main.command("install")
@click.argument("root", type=click.Path(exists=True, file_okay=False))
@click.pass_context
def install(ctx: click.Context, root: str) -> None:
    """Install dependencies with the detected package manager."""
    inspector = _make_inspector(ctx)
    try:
        asyncio.run(inspector.install_dependencies(root))
    except InspectorError as e:
        _exit_for(e)


if __name__ == "__main__":
    main()
