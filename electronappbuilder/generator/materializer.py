import json
import shutil
from pathlib import Path
from typing import Any, Dict

from .config import ProjectConfig, ProjectExistsError

MANIFEST = "package.json"
DEMO_DIR = Path("src") / "app" / "components" / "welcome"
ENTRY_POINT = Path("src") / "app" / "app.tsx"

FALLBACK_APP = """export default function App() {
  return (
    <div className="flex h-screen items-center justify-center">
      <h1 className="text-2xl font-semibold">Hello from Electron + React</h1>
    </div>
  )
}
"""


def default_template_root() -> Path:
    return Path(__file__).resolve().parents[1] / "template"


class TemplateMaterializer:
    def __init__(self, template_root: Path) -> None:
        self.template_root = Path(template_root)

    def materialize(self, config: ProjectConfig, destination: Path) -> Path:
        destination = Path(destination)

        if destination.exists():
            raise ProjectExistsError(destination)
        if not self.template_root.is_dir():
            raise FileNotFoundError(f"Template not found at {self.template_root}")

        shutil.copytree(self.template_root, destination)

        if not config.demo:
            self.remove_demo(destination)

        self.update_manifest(destination, config.name)
        return destination

    def remove_demo(self, destination: Path) -> None:
        demo_dir = destination / DEMO_DIR
        if demo_dir.exists():
            shutil.rmtree(demo_dir)
        # The stock entry point imports the demo component, so swap it out.
        entry = destination / ENTRY_POINT
        entry.parent.mkdir(parents=True, exist_ok=True)
        entry.write_text(FALLBACK_APP, encoding="utf-8")

    def update_manifest(self, destination: Path, project_name: str) -> Dict[str, Any]:
        manifest_path = destination / MANIFEST
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))

        manifest["name"] = project_name
        manifest["description"] = f"A modern Electron application built with {project_name}"

        manifest_path.write_text(
            json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )
        return manifest
