"""Type aliases for the catalog domain.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "LanguageId",
    "MessageKey",
    "ModuleName",
    "ResourcePath",
]

type MessageKey = str
"""Identifier of a single message within a module (e.g., 'closeWindow')."""

type ModuleName = str
"""Source module path the messages belong to (e.g., 'vs/platform/files/common/files')."""

type ResourcePath = str
"""Grouped resource path used as an XLF file ``original`` (e.g., 'extensions/a.b/package')."""

type LanguageId = str
"""Lower-cased locale id (e.g., 'de', 'zh-tw')."""
