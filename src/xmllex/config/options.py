# Copyright 2026 xmllex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tokenizer options model and its YAML file format."""

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

OPTIONS_FILE_NAME = ".xmllex.yaml"

DEFAULT_ILLEGAL_NAME_CHARS = "!\"#$%&'()*+,/;<=>?@[\\]^`{|}~"


class OptionsError(Exception):
    """Raised when an options file cannot be read or is invalid."""


class StandaloneMode(Enum):
    """Which ``standalone`` values in the prolog count as affirmative."""

    LEGACY = "legacy"  # "true"
    XML = "xml"  # "yes"
    LENIENT = "lenient"  # "yes" or "true"


class TokenizerOptions(BaseModel):
    """Behaviour switches for :func:`xmllex.tokenize`.

    Attributes:
        standalone_mode: Vocabulary used to read the prolog ``standalone`` attribute.
        preserve_comment_dashes: Keep dashes inside comment text that do not end
            the comment. When false, such dashes are dropped.
        illegal_name_chars: Characters rejected inside tag, attribute and
            DOCTYPE names.
        skip_whitespace_text: Omit text runs consisting only of whitespace.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    standalone_mode: StandaloneMode = Field(alias="standalone-mode", default=StandaloneMode.LEGACY)
    preserve_comment_dashes: bool = Field(alias="preserve-comment-dashes", default=True)
    illegal_name_chars: str = Field(alias="illegal-name-chars", default=DEFAULT_ILLEGAL_NAME_CHARS)
    skip_whitespace_text: bool = Field(alias="skip-whitespace-text", default=False)

    def is_standalone(self, value: str | None) -> bool:
        """Interpret the value of a prolog ``standalone`` attribute."""
        if self.standalone_mode is StandaloneMode.XML:
            return value == "yes"
        if self.standalone_mode is StandaloneMode.LENIENT:
            return value in ("yes", "true")
        return value == "true"


def load_options(path: Path) -> TokenizerOptions:
    """Load and validate tokenizer options from a YAML file.

    An empty file yields the default options.

    Args:
        path: Path to the options file, conventionally named ``.xmllex.yaml``.

    Returns:
        A validated TokenizerOptions instance.

    Raises:
        OptionsError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise OptionsError(f"Cannot read options file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise OptionsError(f"Invalid YAML in options file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise OptionsError(f"{path}: options file must be a YAML mapping")

    try:
        return TokenizerOptions.model_validate(data)
    except ValidationError as exc:
        raise OptionsError(f"Invalid options file '{path}': {exc}") from exc


def find_options(directory: Path) -> TokenizerOptions:
    """Load the options file from *directory*, falling back to defaults.

    Looks for ``OPTIONS_FILE_NAME`` directly inside *directory*; when no such
    file exists the default options are returned.

    Raises:
        OptionsError: If the options file exists but is invalid.
    """
    options_file = directory / OPTIONS_FILE_NAME
    if not options_file.exists():
        return TokenizerOptions()
    return load_options(options_file)


def dump_options(options: TokenizerOptions) -> str:
    """Render *options* as YAML text that :func:`load_options` accepts."""
    data = options.model_dump(by_alias=True, mode="json")
    return yaml.dump(data, default_flow_style=False, sort_keys=True)
