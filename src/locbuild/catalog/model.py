"""Translation data model.

Raw catalog JSON is discriminated exactly once, at ingestion, into the
tagged types defined here. Downstream stages pattern-match on them and
never re-inspect raw JSON.

Key variants:
    BareKey      - a plain string key
    CommentedKey - a key carrying translator comment lines

Catalog containers:
    BundleManifest - default messages per module plus runtime bundle grouping
    L10nMessage    - a freeform l10n bundle entry with translator comments
    TranslationUnit - one XLF trans-unit (entity-encoded message)
    LanguagePack   - final merged per-language artifact

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from locbuild.catalog.types import MessageKey, ModuleName, ResourcePath
from locbuild.diagnostics import CatalogFormatError, CatalogMismatchError, L10nBundleError

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Keys
    "BareKey",
    "CommentedKey",
    "TranslationKey",
    "parse_translation_key",
    "parse_translation_keys",
    # Catalogs
    "BundleManifest",
    "L10nEntry",
    "L10nMessage",
    "parse_l10n_bundle",
    # Units and packs
    "TranslationUnit",
    "LanguagePack",
]

_MANIFEST_SECTIONS = frozenset({"keys", "messages", "bundles"})


# ============================================================================
# KEYS
# ============================================================================


@dataclass(frozen=True, slots=True)
class BareKey:
    """Translation key without translator comments.

    Attributes:
        key: Message identifier
    """

    key: MessageKey

    @property
    def real_key(self) -> MessageKey:
        """Identifier used for lookups and trans-unit ids."""
        return self.key

    @property
    def comment_lines(self) -> tuple[str, ...]:
        """Bare keys never carry comments."""
        return ()


@dataclass(frozen=True, slots=True)
class CommentedKey:
    """Translation key with translator comment lines.

    Attributes:
        key: Message identifier
        comment: Comment lines, in source order
    """

    key: MessageKey
    comment: tuple[str, ...] = ()

    @property
    def real_key(self) -> MessageKey:
        """Identifier used for lookups and trans-unit ids."""
        return self.key

    @property
    def comment_lines(self) -> tuple[str, ...]:
        """Comment lines, in source order."""
        return self.comment


type TranslationKey = BareKey | CommentedKey
"""A catalog key: either bare or structured with translator comments."""


def parse_translation_key(value: object) -> TranslationKey:
    """Discriminate a raw JSON key into a TranslationKey.

    Args:
        value: A string, or an object ``{"key": str, "comment"?: [str, ...]}``

    Returns:
        BareKey for strings, CommentedKey for structured keys

    Raises:
        CatalogFormatError: If value has neither shape

    Example:
        >>> parse_translation_key("close")
        BareKey(key='close')
        >>> parse_translation_key({"key": "open", "comment": ["verb"]})
        CommentedKey(key='open', comment=('verb',))
    """
    match value:
        case BareKey() | CommentedKey():
            return value
        case str():
            return BareKey(value)
        case {"key": str(key), **rest}:
            comment = rest.get("comment")
            if comment is None:
                return CommentedKey(key)
            if isinstance(comment, list) and all(isinstance(line, str) for line in comment):
                return CommentedKey(key, tuple(comment))
    msg = f"Invalid translation key: {value!r}"
    raise CatalogFormatError(msg)


def parse_translation_keys(values: Sequence[object]) -> tuple[TranslationKey, ...]:
    """Discriminate a sequence of raw JSON keys."""
    return tuple(parse_translation_key(value) for value in values)


# ============================================================================
# CATALOGS
# ============================================================================


@dataclass(frozen=True, slots=True)
class BundleManifest:
    """Default messages of every module and their grouping into runtime bundles.

    Invariant: for every module, ``len(keys[module]) == len(messages[module])``.
    Enforced at construction.

    Attributes:
        keys: Ordered keys per module
        messages: Ordered default (English) messages per module
        bundles: Ordered module list per bundle name
    """

    keys: Mapping[ModuleName, tuple[TranslationKey, ...]]
    messages: Mapping[ModuleName, tuple[str, ...]]
    bundles: Mapping[str, tuple[ModuleName, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate key/message parity for every module.

        Raises:
            CatalogMismatchError: If any module's sequences differ in length
        """
        for module, keys in self.keys.items():
            messages = self.messages.get(module)
            message_count = 0 if messages is None else len(messages)
            if message_count != len(keys):
                raise CatalogMismatchError(len(keys), message_count, module=module)

    @staticmethod
    def is_manifest(value: object) -> bool:
        """Check whether decoded JSON has exactly the manifest sections.

        Extra or missing top-level keys disqualify the object.
        """
        return isinstance(value, dict) and set(value) == _MANIFEST_SECTIONS

    @classmethod
    def from_json(cls, value: object) -> BundleManifest:
        """Build a manifest from decoded ``nls.metadata.json`` content.

        Args:
            value: Decoded JSON object with ``keys``, ``messages`` and ``bundles``

        Returns:
            Validated BundleManifest

        Raises:
            CatalogFormatError: If the object is not a manifest or a section is malformed
            CatalogMismatchError: If a module's keys and messages differ in length
        """
        if not isinstance(value, dict) or not cls.is_manifest(value):
            msg = "Not a bundle manifest: expected exactly 'keys', 'messages' and 'bundles'"
            raise CatalogFormatError(msg)
        raw_keys, raw_messages, raw_bundles = value["keys"], value["messages"], value["bundles"]
        if not all(isinstance(section, dict) for section in (raw_keys, raw_messages, raw_bundles)):
            msg = "Bundle manifest sections must be JSON objects"
            raise CatalogFormatError(msg)

        keys: dict[ModuleName, tuple[TranslationKey, ...]] = {}
        for module, entries in raw_keys.items():
            if not isinstance(entries, list):
                msg = f"Keys for module {module} must be a list"
                raise CatalogFormatError(msg)
            keys[module] = parse_translation_keys(entries)
        messages: dict[ModuleName, tuple[str, ...]] = {}
        for module, entries in raw_messages.items():
            if not isinstance(entries, list) or not all(isinstance(m, str) for m in entries):
                msg = f"Messages for module {module} must be a list of strings"
                raise CatalogFormatError(msg)
            messages[module] = tuple(entries)
        bundles: dict[str, tuple[ModuleName, ...]] = {}
        for name, entries in raw_bundles.items():
            if not isinstance(entries, list) or not all(isinstance(m, str) for m in entries):
                msg = f"Modules for bundle {name} must be a list of strings"
                raise CatalogFormatError(msg)
            bundles[name] = tuple(entries)
        return cls(keys=keys, messages=messages, bundles=bundles)

    @property
    def modules(self) -> tuple[ModuleName, ...]:
        """Module names in manifest order."""
        return tuple(self.keys)

    def entries(self, module: ModuleName) -> Iterator[tuple[TranslationKey, str]]:
        """Iterate (key, default message) pairs of a module in manifest order."""
        return zip(self.keys[module], self.messages[module], strict=True)

    def default_messages(self) -> dict[ModuleName, dict[MessageKey, str]]:
        """Map every module to ``{real_key: default message}``.

        The first occurrence of a duplicated key wins.
        """
        defaults: dict[ModuleName, dict[MessageKey, str]] = {}
        for module in self.keys:
            module_defaults: dict[MessageKey, str] = {}
            for key, message in self.entries(module):
                module_defaults.setdefault(key.real_key, message)
            defaults[module] = module_defaults
        return defaults


@dataclass(frozen=True, slots=True)
class L10nMessage:
    """A freeform l10n bundle entry carrying translator comments.

    Attributes:
        message: Default message text
        comment: Comment lines
    """

    message: str
    comment: tuple[str, ...] = ()


type L10nEntry = str | L10nMessage
"""A freeform l10n bundle value: a bare message or a message with comments."""


def parse_l10n_bundle(value: object, *, source: str = "") -> dict[MessageKey, L10nEntry]:
    """Validate a decoded ``bundle.l10n.json`` object.

    Args:
        value: Decoded JSON; every value must be a string or
            ``{"message": str, "comment": [str, ...]}``
        source: File name used in error messages

    Returns:
        Mapping of key to L10nEntry, in source order

    Raises:
        L10nBundleError: If the object or any of its values has the wrong shape
    """
    where = f" {source}" if source else ""
    if not isinstance(value, dict):
        msg = f"Invalid l10n bundle{where}: expected a JSON object"
        raise L10nBundleError(msg)
    bundle: dict[MessageKey, L10nEntry] = {}
    for key, entry in value.items():
        match entry:
            case str():
                bundle[key] = entry
            case {"message": str(message), "comment": list(comment)} if all(
                isinstance(line, str) for line in comment
            ):
                bundle[key] = L10nMessage(message, tuple(comment))
            case _:
                msg = (
                    f"Invalid l10n bundle{where}. "
                    f"The value for key {key} is not in the expected format."
                )
                raise L10nBundleError(msg)
    return bundle


# ============================================================================
# UNITS AND PACKS
# ============================================================================


@dataclass(frozen=True, slots=True)
class TranslationUnit:
    """One trans-unit of an XLF file.

    Attributes:
        id: Unit identifier, unique within its file
        message: Entity-encoded source message
        comment: Entity-encoded translator note (CRLF-joined lines), if any
    """

    id: MessageKey
    message: str
    comment: str | None = None


@dataclass(slots=True)
class LanguagePack:
    """Merged translations of one target language.

    Attributes:
        version: Pack format version
        contents: Relative resource path -> {key: translated message}, in encounter order
    """

    version: str
    contents: dict[ResourcePath, dict[MessageKey, str]] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Plain JSON-compatible representation."""
        return {"version": self.version, "contents": self.contents}
