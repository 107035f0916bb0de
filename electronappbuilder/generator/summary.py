from jinja2 import Environment, StrictUndefined

from .config import ProjectConfig
from .postcreate import PostCreateResult

DOCS_URL = "https://github.com/guasam/electron-react-app"

SUMMARY_TEMPLATE = """\
[green bold]✅ Project created successfully![/]

[cyan]Next steps:[/]
  cd {{ name }}
{%- if not installed %}
  {{ pm }} install
{%- endif %}
  {{ pm }} run dev

[cyan]📚 Documentation:[/]
  {{ docs_url }}

[cyan]🎉 Happy coding![/]
"""

_env = Environment(
    undefined=StrictUndefined,
    keep_trailing_newline=True,
    autoescape=False,
)


def render_summary(config: ProjectConfig, result: PostCreateResult) -> str:
    return _env.from_string(SUMMARY_TEMPLATE).render(
        name=config.name,
        pm=config.package_manager.value,
        installed=result.dependencies_installed,
        docs_url=DOCS_URL,
    )
