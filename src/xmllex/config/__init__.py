# Copyright 2026 xmllex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tokenizer configuration."""

from xmllex.config.options import (
    DEFAULT_ILLEGAL_NAME_CHARS,
    OPTIONS_FILE_NAME,
    OptionsError,
    StandaloneMode,
    TokenizerOptions,
    dump_options,
    find_options,
    load_options,
)

__all__ = [
    "DEFAULT_ILLEGAL_NAME_CHARS",
    "OPTIONS_FILE_NAME",
    "OptionsError",
    "StandaloneMode",
    "TokenizerOptions",
    "dump_options",
    "find_options",
    "load_options",
]
