"""Generated pipeline output.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = ["OutputFile"]


@dataclass(frozen=True, slots=True)
class OutputFile:
    """A generated file: relative POSIX path plus encoded contents.

    Attributes:
        path: Output path relative to the destination directory
        contents: Encoded bytes, written verbatim
    """

    path: str
    contents: bytes

    @classmethod
    def from_text(cls, path: str, text: str, encoding: str = "utf-8") -> OutputFile:
        """Create an output file from text."""
        return cls(path, text.encode(encoding))

    def text(self, encoding: str = "utf-8") -> str:
        """Decode the contents."""
        return self.contents.decode(encoding)

    def write_to(self, directory: str | Path) -> Path:
        """Write the file below directory, creating parent folders.

        Returns:
            The written path
        """
        target = Path(directory) / self.path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(self.contents)
        return target
