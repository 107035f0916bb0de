from pathlib import Path
from typing import Optional

import typer

from ..utils.console import console, fail, success
from .config import (
    GeneratorError,
    PackageManager,
    TemplateName,
    load_defaults,
)
from .materializer import TemplateMaterializer, default_template_root
from .postcreate import run_post_create
from .prompts import collect_config, collect_name
from .rewriter import rewrite_project_name_safely
from .summary import render_summary

VERSION = "1.0.0"
TEMPLATE_ROOT = default_template_root()

app = typer.Typer(
    add_completion=False,
    help="Create a modern Electron app with React, TypeScript, and TailwindCSS",
)


def _version(value: bool) -> None:
    if value:
        typer.echo(VERSION)
        raise typer.Exit()


@app.command()
def create(
    name: Optional[str] = typer.Argument(None, help="Project name"),
    template: Optional[TemplateName] = typer.Option(
        None, "--template", "-t", help="Template to use (default: default)"
    ),
    package_manager: Optional[PackageManager] = typer.Option(
        None, "--package-manager", "-p", help="Package manager used to install dependencies"
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip prompts and use defaults"),
    git: Optional[bool] = typer.Option(
        None, "--git/--no-git", help="Initialize a git repository (default: yes)"
    ),
    install: Optional[bool] = typer.Option(
        None, "--install/--no-install", help="Install dependencies (default: yes)"
    ),
    demo: Optional[bool] = typer.Option(
        None, "--demo/--no-demo", help="Include the welcome demo component"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", help="YAML file with option defaults"
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    console.print("\n[blue bold]🚀 Create Electron React App[/]\n")

    try:
        defaults = load_defaults(config_file)
        project_name = collect_name(name)
    except GeneratorError as e:
        fail(str(e))
        raise typer.Exit(code=1)

    project_path = Path.cwd().resolve() / project_name
    if project_path.exists():
        fail(f'Directory "{project_name}" already exists!')
        raise typer.Exit(code=1)

    config = collect_config(
        project_name,
        yes=yes,
        git=git,
        install=install,
        template=template,
        demo=demo,
        package_manager=package_manager,
        defaults=defaults,
    )

    try:
        with console.status("Creating project..."):
            TemplateMaterializer(TEMPLATE_ROOT).materialize(config, project_path)
    except (GeneratorError, OSError, ValueError) as e:
        fail(f"Failed to create project: {e}")
        raise typer.Exit(code=1)

    rewrite_project_name_safely(project_path, config.name)
    success(f"Project files written to {project_path}")

    result = run_post_create(project_path, config)
    console.print(render_summary(config, result))


def main() -> None:
    app(prog_name="create-electron-react-app")


if __name__ == "__main__":
    main()
