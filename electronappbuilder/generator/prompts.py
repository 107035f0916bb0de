from typing import Optional

from rich.prompt import Confirm, Prompt

from ..utils.console import console, fail
from .config import (
    DEFAULT_PROJECT_NAME,
    TEMPLATE_LABELS,
    Defaults,
    InvalidProjectNameError,
    PackageManager,
    ProjectConfig,
    TemplateName,
    validate_project_name,
)


def collect_name(name: Optional[str] = None) -> str:
    """Return a valid project name, prompting until one is given.

    A name passed on the command line is never re-asked; if it is invalid
    the run is aborted.
    """
    if name is not None:
        problem = validate_project_name(name)
        if problem:
            raise InvalidProjectNameError(f'Invalid project name "{name}": {problem}')
        return name

    while True:
        answer = Prompt.ask("What is your project named?", default=DEFAULT_PROJECT_NAME, console=console)
        answer = answer.strip()
        problem = validate_project_name(answer)
        if problem is None:
            return answer
        fail(problem)


def _ask_template(default: TemplateName) -> TemplateName:
    for tmpl in TemplateName:
        console.print(f"  [cyan]{tmpl.value}[/]  {TEMPLATE_LABELS[tmpl]}")
    answer = Prompt.ask(
        "Which template would you like to use?",
        choices=[t.value for t in TemplateName],
        default=default.value,
        console=console,
    )
    return TemplateName(answer)


def _ask_package_manager(default: PackageManager) -> PackageManager:
    answer = Prompt.ask(
        "Which package manager would you like to use?",
        choices=[pm.value for pm in PackageManager],
        default=default.value,
        console=console,
    )
    return PackageManager(answer)


def collect_config(
    name: str,
    *,
    yes: bool = False,
    git: Optional[bool] = None,
    install: Optional[bool] = None,
    template: Optional[TemplateName] = None,
    demo: Optional[bool] = None,
    package_manager: Optional[PackageManager] = None,
    defaults: Optional[Defaults] = None,
) -> ProjectConfig:
    """Merge explicit options, defaults and interactive answers.

    ``None`` means "not given on the command line". With ``yes`` set every
    such option falls back to ``defaults`` without prompting.
    """
    defaults = defaults or Defaults()

    if yes:
        template = template or defaults.template
        if demo is None:
            demo = defaults.demo and template is not TemplateName.minimal
        return ProjectConfig(
            name=name,
            git=defaults.git if git is None else git,
            install=defaults.install if install is None else install,
            package_manager=package_manager or defaults.package_manager,
            template=template,
            demo=demo,
        )

    if template is None:
        template = _ask_template(defaults.template)
    if git is None:
        git = Confirm.ask("Initialize a git repository?", default=defaults.git, console=console)
    if install is None:
        install = Confirm.ask("Install dependencies?", default=defaults.install, console=console)
    if package_manager is None:
        if install:
            package_manager = _ask_package_manager(defaults.package_manager)
        else:
            package_manager = defaults.package_manager
    if demo is None:
        if template is TemplateName.minimal:
            demo = False
        else:
            demo = Confirm.ask("Include the welcome demo component?", default=defaults.demo, console=console)

    return ProjectConfig(
        name=name,
        git=git,
        install=install,
        package_manager=package_manager,
        template=template,
        demo=demo,
    )
