from pathlib import Path

from electronappbuilder.generator import rewriter
from electronappbuilder.generator.rewriter import (
    iter_project_files,
    replace_placeholders,
    rewrite_project_name,
    rewrite_project_name_safely,
)


def test_replaces_all_placeholder_forms():
    text = "ElectronReactApp / electron-react-app / window['era']"
    assert replace_placeholders(text, "my-app") == "My-app / my-app / window['my-app']"


def test_whole_word_only():
    text = "generated operator era era.svg eras"
    assert replace_placeholders(text, "demo") == "generated operator demo era.svg eras"


def test_replacement_is_not_rescanned():
    # "era" inside the substituted name must not be replaced again
    assert replace_placeholders("ElectronReactApp era", "era") == "Era era"
    assert replace_placeholders("electron-react-app", "electron-react-app") == "electron-react-app"


def _make_tree(root: Path) -> None:
    (root / "src").mkdir(parents=True)
    (root / "node_modules" / "pkg").mkdir(parents=True)
    (root / "dist").mkdir()
    (root / "src" / "main.ts").write_text("title: 'ElectronReactApp'\n", encoding="utf-8")
    (root / "node_modules" / "pkg" / "index.js").write_text("era\n", encoding="utf-8")
    (root / "dist" / "out.js").write_text("era\n", encoding="utf-8")
    (root / "debug.log").write_text("era\n", encoding="utf-8")
    (root / "package.json").write_text('{"name": "electron-react-app"}', encoding="utf-8")
    (root / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe era")


def test_iter_project_files_skips_ignored(tmp_path: Path):
    _make_tree(tmp_path)
    names = {p.relative_to(tmp_path).as_posix() for p in iter_project_files(tmp_path)}
    assert names == {"src/main.ts", "logo.png"}


def test_rewrite_project_name(tmp_path: Path):
    _make_tree(tmp_path)
    changed = rewrite_project_name(tmp_path, "my-app")

    assert changed == [tmp_path / "src" / "main.ts"]
    assert (tmp_path / "src" / "main.ts").read_text(encoding="utf-8") == "title: 'My-app'\n"
    assert (tmp_path / "node_modules" / "pkg" / "index.js").read_text(encoding="utf-8") == "era\n"
    assert (tmp_path / "package.json").read_text(encoding="utf-8") == '{"name": "electron-react-app"}'
    assert (tmp_path / "logo.png").read_bytes().endswith(b" era")


def test_safe_rewrite_warns_and_continues(tmp_path: Path, monkeypatch):
    def boom(root, name):
        raise PermissionError("read-only")

    warnings = []
    monkeypatch.setattr(rewriter, "rewrite_project_name", boom)
    monkeypatch.setattr(rewriter, "warn", warnings.append)

    assert rewrite_project_name_safely(tmp_path, "x") == []
    assert "read-only" in warnings[0]


def test_safe_rewrite_survives_unexpected_errors(tmp_path: Path, monkeypatch):
    def boom(root, name):
        raise RuntimeError("bad pattern")

    warnings = []
    monkeypatch.setattr(rewriter, "rewrite_project_name", boom)
    monkeypatch.setattr(rewriter, "warn", warnings.append)

    assert rewrite_project_name_safely(tmp_path, "x") == []
    assert "bad pattern" in warnings[0]
