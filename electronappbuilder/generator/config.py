import re
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")
DEFAULT_PROJECT_NAME = "my-electron-app"


class GeneratorError(Exception):
    """Base class for fatal generation errors."""


class ProjectExistsError(GeneratorError):
    def __init__(self, path: Path) -> None:
        super().__init__(f'Directory "{path.name}" already exists!')
        self.path = path


class ConfigError(GeneratorError):
    pass


class InvalidProjectNameError(GeneratorError):
    pass


class PackageManager(str, Enum):
    npm = "npm"
    yarn = "yarn"
    pnpm = "pnpm"
    bun = "bun"


class TemplateName(str, Enum):
    default = "default"
    minimal = "minimal"


TEMPLATE_LABELS: Dict[TemplateName, str] = {
    TemplateName.default: "Default (React + TypeScript + TailwindCSS + Shadcn)",
    TemplateName.minimal: "Minimal (React + TypeScript)",
}

INSTALL_COMMANDS: Dict[PackageManager, List[str]] = {
    PackageManager.npm: ["npm", "install"],
    PackageManager.yarn: ["yarn", "install"],
    PackageManager.pnpm: ["pnpm", "install"],
    PackageManager.bun: ["bun", "install"],
}


def validate_project_name(name: str) -> Optional[str]:
    """Return an error message for an unusable project name, or None."""
    if not name or not name.strip():
        return "Project name is required"
    if not NAME_PATTERN.match(name):
        return "Project name must be lowercase with hyphens only"
    return None


def capitalize_name(name: str) -> str:
    # Only the first character changes: "my-app" -> "My-app".
    return name[:1].upper() + name[1:]


class Defaults(BaseModel):
    """Option defaults, optionally overridden by a YAML file."""

    model_config = ConfigDict(extra="forbid")

    git: bool = True
    install: bool = True
    package_manager: PackageManager = PackageManager.npm
    template: TemplateName = TemplateName.default
    demo: bool = True


class ProjectConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    git: bool = True
    install: bool = True
    package_manager: PackageManager = PackageManager.npm
    template: TemplateName = TemplateName.default
    demo: bool = True

    @field_validator("name")
    @classmethod
    def _check_name(cls, v: str) -> str:
        problem = validate_project_name(v)
        if problem:
            raise ValueError(problem)
        return v

    @property
    def install_command(self) -> List[str]:
        return list(INSTALL_COMMANDS[self.package_manager])


def load_defaults(path: Optional[Path] = None) -> Defaults:
    """Read option defaults from a YAML file; no path means built-in defaults."""
    if path is None:
        return Defaults()
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data: Any = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping of option defaults")
    try:
        return Defaults.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid defaults in {path}:\n{e}") from e
