"""Error types for the localization pipeline.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    BatchError,
    BundleResolutionError,
    CatalogFormatError,
    CatalogMismatchError,
    ClassificationError,
    IslPreparationError,
    L10nBundleError,
    LocalizationError,
    MalformedLineError,
    PackPreparationError,
    UnknownInputError,
    XlfSealedError,
    XlfStructureError,
)

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
