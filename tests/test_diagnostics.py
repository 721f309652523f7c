"""Tests for the exception hierarchy and public API surface."""

import pytest

import locbuild
from locbuild.diagnostics import (
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


class TestHierarchy:
    """Every pipeline error derives from LocalizationError."""

    @pytest.mark.parametrize(
        "error_type",
        [
            BatchError,
            BundleResolutionError,
            CatalogFormatError,
            ClassificationError,
            L10nBundleError,
            MalformedLineError,
            UnknownInputError,
            XlfSealedError,
            XlfStructureError,
        ],
    )
    def test_base_class(self, error_type: type[Exception]) -> None:
        """Callers can catch the whole family at once."""
        assert issubclass(error_type, LocalizationError)

    def test_mismatch_is_format_error(self) -> None:
        """A length mismatch is a kind of malformed catalog."""
        assert issubclass(CatalogMismatchError, CatalogFormatError)

    def test_batch_subclasses(self) -> None:
        """Pack and installer failures are batch errors."""
        assert issubclass(PackPreparationError, BatchError)
        assert issubclass(IslPreparationError, BatchError)


class TestMessages:
    """Error messages carry the originating context."""

    def test_mismatch_without_module(self) -> None:
        """The module part is omitted when unknown."""
        assert str(CatalogMismatchError(1, 2)) == "Unmatching keys(1) and messages(2)."

    def test_unknown_input(self) -> None:
        """The path leads the message."""
        error = UnknownInputError("a/b.json", "is not a core meta data file.")
        assert str(error) == "File a/b.json is not a core meta data file."
        assert error.path == "a/b.json"

    def test_bundle_resolution(self) -> None:
        """Bundle, module and language are all named."""
        error = BundleResolutionError("b", "mod", "de")
        assert "mod" in str(error)
        assert "bundle b" in str(error)
        assert "language de" in str(error)

    def test_batch_error_collects(self) -> None:
        """Every failure is kept in input order."""
        errors = [XlfStructureError("first"), ValueError("second")]
        batch = BatchError("Failed", errors)
        assert batch.errors == tuple(errors)
        assert str(batch) == "Failed (2 failed): first; second"


class TestPublicApi:
    """Test the package namespace."""

    def test_exports_resolve(self) -> None:
        """Everything in __all__ is importable from the package."""
        for name in locbuild.__all__:
            assert hasattr(locbuild, name), name

    def test_version(self) -> None:
        """A version string is always available."""
        assert isinstance(locbuild.__version__, str)
        assert locbuild.__version__
