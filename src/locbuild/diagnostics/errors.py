"""Localization pipeline exception hierarchy.

Structural failures (mismatched catalogs, malformed XLIFF, bad installer
script lines, unclassifiable paths) are raised. Missing translations are
never errors: they fall back to default messages and are only counted.

Batch operations collect every individual failure and raise a single
BatchError subclass carrying all of them, so no partial output escapes.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "BatchError",
    "BundleResolutionError",
    "CatalogFormatError",
    "CatalogMismatchError",
    "ClassificationError",
    "IslPreparationError",
    "L10nBundleError",
    "LocalizationError",
    "MalformedLineError",
    "PackPreparationError",
    "UnknownInputError",
    "XlfSealedError",
    "XlfStructureError",
]


class LocalizationError(Exception):
    """Base exception for all localization pipeline errors."""


class CatalogFormatError(LocalizationError):
    """Catalog JSON does not have the expected shape.

    Raised at ingestion when a translation key is neither a string nor a
    ``{"key": ..., "comment": [...]}`` object, or when a bundle manifest
    lacks one of its required sections.
    """


class CatalogMismatchError(CatalogFormatError):
    """Key and message sequences of a catalog have different lengths.

    Attributes:
        key_count: Number of keys supplied
        message_count: Number of messages supplied
        module: Module or file the catalog belongs to (empty if unknown)
    """

    def __init__(self, key_count: int, message_count: int, *, module: str = "") -> None:
        """Initialize CatalogMismatchError.

        Args:
            key_count: Number of keys supplied
            message_count: Number of messages supplied
            module: Module or file the catalog belongs to
        """
        location = f" in {module}" if module else ""
        super().__init__(
            f"Unmatching keys({key_count}) and messages({message_count}){location}."
        )
        self.key_count = key_count
        self.message_count = message_count
        self.module = module


class XlfStructureError(LocalizationError):
    """XLIFF document cannot be parsed or lacks required nodes/attributes."""


class XlfSealedError(LocalizationError):
    """File added to an XLF document that has already been serialized."""


class ClassificationError(LocalizationError):
    """Module path matches no resource classification rule.

    Attributes:
        path: The module path that could not be classified
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"Could not identify the XLF bundle for {path}")
        self.path = path


class MalformedLineError(LocalizationError):
    """Installer script data line is not of the form ``key=value``.

    Attributes:
        line: The offending line
        line_number: 1-based line number (0 if unknown)
    """

    def __init__(self, line: str, *, line_number: int = 0) -> None:
        where = f" at line {line_number}" if line_number else ""
        super().__init__(f"Badly formatted message found{where}: {line}")
        self.line = line
        self.line_number = line_number


class UnknownInputError(LocalizationError):
    """Input file is not one the receiving stage knows how to process.

    Attributes:
        path: Path of the rejected file
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"File {path} {reason}")
        self.path = path


class L10nBundleError(LocalizationError):
    """Freeform l10n bundle JSON has a value of the wrong shape."""


class BundleResolutionError(LocalizationError):
    """Generated bundle references a module with no resolved messages.

    Non-fatal: collected in the resolver result, never raised by it.

    Attributes:
        bundle: Bundle name
        module: Missing module name
        language: Language id being generated
    """

    def __init__(self, bundle: str, module: str, language: str) -> None:
        super().__init__(
            f"Didn't find messages for module {module} (bundle {bundle}, language {language})."
        )
        self.bundle = bundle
        self.module = module
        self.language = language


class BatchError(LocalizationError):
    """One or more operations of a jointly awaited batch failed.

    Attributes:
        errors: Every collected failure, in input order
    """

    def __init__(self, message: str, errors: Iterable[BaseException]) -> None:
        self.errors: tuple[BaseException, ...] = tuple(errors)
        details = "; ".join(str(error) for error in self.errors)
        super().__init__(f"{message} ({len(self.errors)} failed): {details}")


class PackPreparationError(BatchError):
    """Language pack preparation failed; no pack files were emitted."""


class IslPreparationError(BatchError):
    """Installer script preparation failed; no script files were emitted."""
