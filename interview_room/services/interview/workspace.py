"""File access for the interviewer: read-only context folder and writable memory folder."""

import logging
import re
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class WorkspacePathError(ValueError):
    """A requested path resolves outside its workspace root."""


def _resolve_inside(root: Path, path: str) -> Path:
    """Resolve ``path`` against ``root`` and reject anything that escapes it."""
    root = root.resolve()
    candidate = (root / path.lstrip("/")).resolve()
    if candidate != root and not candidate.is_relative_to(root):
        raise WorkspacePathError(f"Path escapes workspace: {path}")
    return candidate


class ContextWorkspace:
    """Read-only view over the interview's reference material (README, CVs, PDFs)."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def resolve(self, path: str) -> Path:
        return _resolve_inside(self.root, path)

    def glob(self, pattern: str) -> list[str]:
        """Paths (relative to the root) of files matching a glob pattern."""
        root = self.root.resolve()
        return sorted(
            p.relative_to(root).as_posix()
            for p in root.glob(pattern.lstrip("/"))
            if p.is_file()
        )

    def grep(
        self,
        query: str,
        before_context: int = 0,
        after_context: int = 0,
    ) -> list[dict[str, str]]:
        """Regex search over markdown files, returning matching lines with context."""
        pattern = re.compile(query)
        matches: list[dict[str, str]] = []
        for rel_path in self.glob("**/*.md"):
            lines = self.resolve(rel_path).read_text(encoding="utf-8").split("\n")
            selected: set[int] = set()
            for index, line in enumerate(lines):
                if pattern.search(line):
                    start = max(0, index - before_context)
                    end = min(len(lines), index + after_context + 1)
                    selected.update(range(start, end))
            if selected:
                content = "\n".join(f"{i + 1}: {lines[i]}" for i in sorted(selected))
                matches.append({"file": rel_path, "content": content})
        return matches

    def read_file(self, path: str, start_line: int | None = None, end_line: int | None = None) -> str:
        """Read a 1-based inclusive line range of a text file."""
        content = self.resolve(path).read_text(encoding="utf-8")
        start = max(1, start_line or 1)
        return "\n".join(content.split("\n")[start - 1:end_line])

    def read_bytes(self, path: str) -> bytes:
        return self.resolve(path).read_bytes()

    def list_dir(self, path: str = ".") -> list[str]:
        """Children of a directory; directories carry a trailing slash."""
        directory = self.resolve(path)
        return sorted(
            f"{child.name}/" if child.is_dir() else child.name
            for child in directory.iterdir()
        )


class MemoryStore:
    """Writable scratch directory the interviewer uses to keep notes across turns."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def _path(self, path: str) -> Path:
        self.root.mkdir(parents=True, exist_ok=True)
        return _resolve_inside(self.root, path)

    def view(self, path: str, view_range: list[int] | None = None) -> str:
        target = self._path(path)
        if target.is_dir():
            return "\n".join(
                sorted(f"{c.name}/" if c.is_dir() else c.name for c in target.iterdir())
            )
        content = target.read_text(encoding="utf-8")
        if view_range:
            start_line, end_line = view_range[0], view_range[1] if len(view_range) > 1 else None
            if end_line is not None and end_line < 0:
                end_line = None
            return "\n".join(content.split("\n")[start_line - 1:end_line])
        return content

    def create(self, path: str, file_text: str) -> str:
        target = self._path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(file_text, encoding="utf-8")
        return f"File created: {path}"

    def str_replace(self, path: str, old_str: str, new_str: str) -> str:
        target = self._path(path)
        content = target.read_text(encoding="utf-8")
        if old_str not in content:
            raise ValueError(f"String not found in file: {path}")
        target.write_text(content.replace(old_str, new_str, 1), encoding="utf-8")
        return f"String replaced in file: {path}"

    def insert(self, path: str, insert_line: int, insert_text: str) -> str:
        target = self._path(path)
        lines = target.read_text(encoding="utf-8").split("\n")
        index = max(0, min(insert_line - 1, len(lines)))
        lines.insert(index, insert_text)
        target.write_text("\n".join(lines), encoding="utf-8")
        return f"Text inserted at line {insert_line} in file: {path}"

    def delete(self, path: str) -> str:
        self._path(path).unlink()
        return f"File deleted: {path}"

    def rename(self, old_path: str, new_path: str) -> str:
        source = self._path(old_path)
        destination = self._path(new_path)
        destination.parent.mkdir(parents=True, exist_ok=True)
        source.rename(destination)
        return f"File renamed from {old_path} to {new_path}"

    def execute(self, command: str, **kwargs: Any) -> str:
        """Dispatch a memory command by name."""
        handlers = {
            "view": self.view,
            "create": self.create,
            "str_replace": self.str_replace,
            "insert": self.insert,
            "delete": self.delete,
            "rename": self.rename,
        }
        handler = handlers.get(command)
        if handler is None:
            raise ValueError(f"Unknown command: {command}")
        return handler(**kwargs)
