"""File access for pipeline stages.

Stages never touch the file system directly. They receive a FileProvider
and address files by POSIX-style paths relative to the provider's root,
which keeps them testable with in-memory fixtures.

Components:
    FileProvider       - Protocol for read/exists/glob access (structural typing)
    PathFileProvider   - Disk-based provider with path-traversal prevention
    MemoryFileProvider - Dictionary-backed provider for tests and composition

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Protocol

__all__ = [
    "FileProvider",
    "MemoryFileProvider",
    "PathFileProvider",
]


class FileProvider(Protocol):
    """Protocol for reading pipeline inputs.

    Paths are POSIX-style and relative to the provider root.

    Example:
        >>> provider = MemoryFileProvider({"a/b.json": "{}"})
        >>> provider.exists("a/b.json"), provider.is_dir("a")
        (True, True)
    """

    def exists(self, path: str) -> bool:
        """Check whether a file exists at path."""

    def is_dir(self, path: str) -> bool:
        """Check whether path names a directory."""

    def read_text(self, path: str) -> str:
        """Read a UTF-8 text file.

        Raises:
            FileNotFoundError: If the file does not exist
        """

    def glob(self, directory: str, pattern: str) -> list[str]:
        """List files below directory whose relative path matches pattern.

        ``**`` matches any number of path segments, including none.

        Returns:
            Matching paths (relative to the provider root), sorted
        """


def _normalize(path: str) -> str:
    normalized = PurePosixPath(path.replace("\\", "/")).as_posix()
    return "" if normalized == "." else normalized


@dataclass(frozen=True, slots=True)
class PathFileProvider:
    """File system provider rooted at a directory.

    Security:
        Every path is resolved and verified to stay inside root, so ``..``
        segments or absolute paths cannot escape it.

    Attributes:
        root: Root directory; relative paths are resolved against it
    """

    root: str | Path = "."
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_resolved_root", Path(self.root).resolve())

    def _resolve(self, path: str) -> Path:
        """Resolve path below root.

        Raises:
            ValueError: If the resolved path escapes the root directory
        """
        full_path = (self._resolved_root / _normalize(path)).resolve()
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError as e:
            msg = f"Path traversal detected: '{path}' escapes {self._resolved_root}"
            raise ValueError(msg) from e
        return full_path

    def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def is_dir(self, path: str) -> bool:
        return self._resolve(path).is_dir()

    def read_text(self, path: str) -> str:
        return self._resolve(path).read_text(encoding="utf-8")

    def glob(self, directory: str, pattern: str) -> list[str]:
        base = self._resolve(directory)
        if not base.is_dir():
            return []
        matches = []
        for candidate in base.rglob("*"):
            if candidate.is_file() and PurePosixPath(
                candidate.relative_to(base).as_posix()
            ).full_match(pattern):
                matches.append(candidate.relative_to(self._resolved_root).as_posix())
        return sorted(matches)


@dataclass(frozen=True, slots=True)
class MemoryFileProvider:
    """In-memory provider backed by a path -> text mapping.

    Directories exist implicitly as prefixes of file paths.

    Attributes:
        files: File path -> UTF-8 text content
    """

    files: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "files", {_normalize(path): text for path, text in self.files.items()}
        )

    def exists(self, path: str) -> bool:
        return _normalize(path) in self.files

    def is_dir(self, path: str) -> bool:
        prefix = _normalize(path)
        if not prefix:
            return bool(self.files)
        return any(name.startswith(prefix + "/") for name in self.files)

    def read_text(self, path: str) -> str:
        try:
            return self.files[_normalize(path)]
        except KeyError:
            msg = f"No such file: '{path}'"
            raise FileNotFoundError(msg) from None

    def glob(self, directory: str, pattern: str) -> list[str]:
        prefix = _normalize(directory)
        matches = []
        for name in self.files:
            if prefix and not name.startswith(prefix + "/"):
                continue
            relative = name[len(prefix) + 1 :] if prefix else name
            if PurePosixPath(relative).full_match(pattern):
                matches.append(name)
        return sorted(matches)
