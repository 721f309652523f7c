"""Inno Setup installer script localization.

Python 3.13+.
"""

from .translator import (
    create_isl_file,
    create_xlf_files_for_isl,
    parse_isl_messages,
    prepare_isl_files,
    translate_isl,
)

__all__ = [
    "create_isl_file",
    "create_xlf_files_for_isl",
    "parse_isl_messages",
    "prepare_isl_files",
    "translate_isl",
]
