"""Data model and loader for tutorials (narrative pages)."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

TUTORIAL_SUFFIXES = {".html", ".htm", ".xhtml"}
CONFIG_NAMES = ("tutorials.yml", "tutorials.yaml", "tutorials.json")


@dataclass
class Tutorial:
    """A tutorial page with optional nested tutorials."""

    name: str
    title: str
    content: str = ""
    children: list["Tutorial"] = field(default_factory=list)
    parent: "Tutorial | None" = field(default=None, repr=False, compare=False)


def load_tutorials(directory: Path, encoding: str = "utf-8") -> list[Tutorial]:
    """Load tutorials from a directory and return the top-level ones.

    Each HTML file is one tutorial named after its stem. An optional
    ``tutorials.yml`` maps names to ``{title, children}``; children may be a
    list of names or a nested mapping of the same shape.
    """
    if not directory.is_dir():
        logger.error("Tutorials directory %s not found", directory)
        return []

    by_name: dict[str, Tutorial] = {}
    for p in sorted(directory.iterdir()):
        if p.suffix.lower() not in TUTORIAL_SUFFIXES:
            continue
        try:
            content = p.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Could not read tutorial %s: %s", p, e)
            continue
        by_name[p.stem] = Tutorial(name=p.stem, title=p.stem, content=content)

    for config_name in CONFIG_NAMES:
        config_path = directory / config_name
        if config_path.exists():
            config = yaml.safe_load(config_path.read_text(encoding=encoding)) or {}
            if isinstance(config, dict):
                _apply_config(config, by_name, None)
            else:
                logger.warning("Ignoring %s: expected a mapping of tutorials", config_path)
            break

    return [t for t in by_name.values() if t.parent is None]


def _apply_config(
    config: dict[str, Any],
    by_name: dict[str, Tutorial],
    parent: Tutorial | None,
) -> None:
    for name, entry in config.items():
        tutorial = by_name.get(str(name))
        if tutorial is None:
            logger.warning("Tutorial config names unknown tutorial %s", name)
            continue
        entry = entry if isinstance(entry, dict) else {}
        if entry.get("title"):
            tutorial.title = str(entry["title"])
        if parent is not None:
            _adopt(parent, tutorial)

        children = entry.get("children") or []
        if isinstance(children, dict):
            _apply_config(children, by_name, tutorial)
        else:
            for child_name in children:
                child = by_name.get(str(child_name))
                if child is None:
                    logger.warning("Tutorial %s lists unknown child %s", name, child_name)
                    continue
                _adopt(tutorial, child)


def _adopt(parent: Tutorial, child: Tutorial) -> None:
    if child.parent is not None:
        return
    ancestor: Tutorial | None = parent
    while ancestor is not None:
        if ancestor is child:
            logger.warning("Tutorial %s cannot be nested inside itself", child.name)
            return
        ancestor = ancestor.parent
    child.parent = parent
    parent.children.append(child)
