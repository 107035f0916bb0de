"""Placeholder name rewriting for a freshly copied template tree.

The template ships with three placeholder spellings of the project name::

    era                 short id used in bridges and app ids
    ElectronReactApp    display name
    electron-react-app  package / executable name

All of them are matched as whole words only, so identifiers that merely
contain a placeholder (``generated``, ``operator``) are left alone. The bare
``era`` token is also skipped when it is part of the bundled ``era.svg``
logo file name.
"""
import re
from pathlib import Path
from typing import Callable, Iterator, List, Sequence, Tuple

from ..utils.console import warn
from .config import capitalize_name

IGNORED_DIRS = frozenset({"node_modules", "dist", "out", ".git"})
IGNORED_SUFFIXES = (".log",)
# package.json is rewritten structurally by the materializer.
IGNORED_ROOT_FILES = frozenset({"package.json"})

Rule = Tuple[str, Callable[[str], str]]

SUBSTITUTION_RULES: Sequence[Rule] = (
    (r"\bera\b(?!\.svg)", lambda name: name),
    (r"\bElectronReactApp\b", capitalize_name),
    (r"\belectron-react-app\b", lambda name: name),
)


def compile_rules(rules: Sequence[Rule] = SUBSTITUTION_RULES) -> "re.Pattern[str]":
    # One alternation keeps the rules in order and scans each file once,
    # so a replacement is never matched again by a later rule.
    return re.compile("|".join(f"(?P<r{i}>{pattern})" for i, (pattern, _) in enumerate(rules)))


def iter_project_files(root: Path) -> Iterator[Path]:
    root = Path(root)
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root)
        if any(part in IGNORED_DIRS for part in rel.parts):
            continue
        if not path.is_file() or path.is_symlink():
            continue
        if path.name.endswith(IGNORED_SUFFIXES):
            continue
        if len(rel.parts) == 1 and rel.name in IGNORED_ROOT_FILES:
            continue
        yield path


def replace_placeholders(text: str, project_name: str, rules: Sequence[Rule] = SUBSTITUTION_RULES) -> str:
    pattern = compile_rules(rules)
    replacements = [make(project_name) for _, make in rules]

    def _sub(match: "re.Match[str]") -> str:
        return replacements[int(match.lastgroup[1:])]

    return pattern.sub(_sub, text)


def rewrite_project_name(root: Path, project_name: str) -> List[Path]:
    """Replace placeholder tokens in every text file under ``root``.

    Returns the files that were changed. Binary (non UTF-8) files are skipped.
    """
    changed: List[Path] = []
    for path in iter_project_files(root):
        try:
            original = path.read_bytes().decode("utf-8")
        except UnicodeDecodeError:
            continue
        updated = replace_placeholders(original, project_name)
        if updated != original:
            path.write_bytes(updated.encode("utf-8"))
            changed.append(path)
    return changed


def rewrite_project_name_safely(root: Path, project_name: str) -> List[Path]:
    try:
        return rewrite_project_name(root, project_name)
    except Exception as e:
        warn(f"Could not update project name in generated files: {e}")
        return []
