"""Classify source modules into XLF resource buckets.

Every module's messages are filed under a Resource: a bucket name (which
becomes the XLF file name) and the translation project it belongs to.
Rules are tried in order and the first match wins, so more specific
prefixes must precede the general ones they share a prefix with.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from locbuild.catalog.types import ModuleName
from locbuild.constants import EDITOR_PROJECT, SERVER_PROJECT, WORKBENCH_PROJECT
from locbuild.diagnostics import ClassificationError

__all__ = ["Resource", "get_resource"]

# Number of leading path segments naming a fine-grained workbench bucket,
# e.g. vs/workbench/contrib/terminal
_FINE_GRAINED_SEGMENTS = 4


@dataclass(frozen=True, slots=True)
class Resource:
    """Grouping bucket for a module's messages.

    Attributes:
        name: Bucket name (e.g., 'vs/platform', 'vs/workbench/contrib/terminal')
        project: Translation project name
    """

    name: str
    project: str

    @property
    def file_stem(self) -> str:
        """Bucket name usable as a flat file name ('vs/platform' -> 'vs_platform')."""
        return self.name.replace("/", "_")


@dataclass(frozen=True, slots=True)
class _Rule:
    prefix: str
    project: str
    fine_grained: bool = False

    def resource_for(self, path: ModuleName) -> Resource:
        if self.fine_grained:
            name = "/".join(path.split("/")[:_FINE_GRAINED_SEGMENTS])
        else:
            name = self.prefix
        return Resource(name, self.project)


_RULES: tuple[_Rule, ...] = (
    _Rule("vs/platform", EDITOR_PROJECT),
    _Rule("vs/editor/contrib", EDITOR_PROJECT),
    _Rule("vs/editor", EDITOR_PROJECT),
    _Rule("vs/base", EDITOR_PROJECT),
    _Rule("vs/code", WORKBENCH_PROJECT),
    _Rule("vs/server", SERVER_PROJECT),
    _Rule("vs/workbench/contrib", WORKBENCH_PROJECT, fine_grained=True),
    _Rule("vs/workbench/services", WORKBENCH_PROJECT, fine_grained=True),
    _Rule("vs/workbench", WORKBENCH_PROJECT),
)


def get_resource(path: ModuleName) -> Resource:
    """Map a module path to its resource bucket.

    Args:
        path: Module path (e.g., 'vs/editor/contrib/find/browser/findWidget')

    Returns:
        The Resource of the first matching rule

    Raises:
        ClassificationError: If no rule matches

    Example:
        >>> get_resource("vs/workbench/contrib/terminal/browser/terminal")
        Resource(name='vs/workbench/contrib/terminal', project='vscode-workbench')
    """
    for rule in _RULES:
        if path.startswith(rule.prefix):
            return rule.resource_for(path)
    raise ClassificationError(path)
