import subprocess
from dataclasses import dataclass
from pathlib import Path

from ..utils.console import console, success, warn
from .config import ProjectConfig


@dataclass
class PostCreateResult:
    git_initialized: bool = False
    dependencies_installed: bool = False


def init_git(destination: Path) -> None:
    subprocess.run(
        ["git", "init"],
        cwd=str(destination),
        check=True,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )


def install_dependencies(destination: Path, config: ProjectConfig) -> None:
    subprocess.run(config.install_command, cwd=str(destination), check=True)


def run_post_create(destination: Path, config: ProjectConfig) -> PostCreateResult:
    result = PostCreateResult()

    if config.git:
        try:
            with console.status("Initializing git repository..."):
                init_git(destination)
        except (subprocess.CalledProcessError, OSError) as e:
            warn(f"Failed to initialize git repository: {e}")
        else:
            result.git_initialized = True
            success("Git repository initialized!")

    if config.install:
        pm = config.package_manager.value
        console.print(f"[bold]→[/] Installing dependencies with {pm}...")
        try:
            install_dependencies(destination, config)
        except (subprocess.CalledProcessError, OSError) as e:
            warn(f"Failed to install dependencies: {e}")
        else:
            result.dependencies_installed = True
            success("Dependencies installed successfully!")

    return result
