"""
In-memory file tree produced by the generators.

Renderers return ``ScFile`` values; a whole crate is an ``ScDirectory``.
``flatten_file_tree`` maps a tree onto ``{Path: content}``; only
``write_file_tree`` touches the file system.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class ScNodeType(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class ScFile:
    """A generated file: a node tag plus its literal text content."""

    content: str
    type: ScNodeType = field(default=ScNodeType.FILE, init=False)


@dataclass(frozen=True)
class ScDirectory:
    """A generated directory keyed by child name."""

    children: dict[str, ScFile | ScDirectory] = field(default_factory=dict)
    type: ScNodeType = field(default=ScNodeType.DIRECTORY, init=False)


def flatten_file_tree(tree: ScDirectory, root: Path) -> dict[Path, str]:
    """Map every file in ``tree`` to its path under ``root``.

    Args:
        tree: The directory to flatten.
        root: Path the directory is rooted at.

    Returns:
        Dictionary mapping file paths to their content, in tree order.
    """
    files: dict[Path, str] = {}
    for name, node in tree.children.items():
        path = root / name
        if isinstance(node, ScDirectory):
            files.update(flatten_file_tree(node, path))
        else:
            files[path] = node.content
    return files


def write_file_tree(tree: ScDirectory, root: Path) -> list[Path]:
    """Create ``tree`` on disk under ``root``, empty directories included.

    Returns:
        Paths of the written files, in tree order.
    """
    root.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for name, node in tree.children.items():
        path = root / name
        if isinstance(node, ScDirectory):
            written.extend(write_file_tree(node, path))
        else:
            path.write_text(node.content, encoding="utf-8")
            written.append(path)
    return written
