"""Extension localization aggregation.

Submodules:
    sources    - Gather package, metadata and bundle sources of one extension
    aggregator - Concurrent per-extension XLF generation with a completion barrier

Python 3.13+.
"""

from .aggregator import (
    CompletionBarrier,
    create_xlf_file_for_extension,
    create_xlf_files_for_extensions,
)
from .sources import L10nMap, add_source, collect_extension_l10n, read_extension_id, source_kind

__all__ = [
    "CompletionBarrier",
    "L10nMap",
    "add_source",
    "collect_extension_l10n",
    "create_xlf_file_for_extension",
    "create_xlf_files_for_extensions",
    "read_extension_id",
    "source_kind",
]
