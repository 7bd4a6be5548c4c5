"""
Configuration for the binding element migration.

Contains the rewrite settings and the supported file extensions.
"""

from typing import Dict

from reactive_unwrap.exceptions import ConfigError


MIGRATION_CONFIG = {
    # Extra indentation for a statement inserted into an empty block,
    # relative to the column of the block's opening brace.
    "block_indent_offset": 2,
    # Indentation of the statements inside a block synthesized for an
    # expression-bodied arrow function, relative to the block itself.
    "content_indent_offset": 2,
    # Suffixes tried (in order) before falling back to numbered names.
    "name_fallback_suffixes": [],
    "numeric_suffix_separator": "_",
}

# Mapping of file extensions to the tree-sitter grammar used to parse them
SUPPORTED_LANGUAGES: Dict[str, str] = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}


def get_migration_config(overrides: dict = None) -> dict:
    """
    Get the migration configuration merged with optional overrides.

    Raises:
        ConfigError: If an override names an unknown setting or an
            indentation offset is negative.
    """
    config = {**MIGRATION_CONFIG}
    for key, value in (overrides or {}).items():
        if key not in MIGRATION_CONFIG:
            known = ", ".join(MIGRATION_CONFIG.keys())
            raise ConfigError(f"Unknown migration setting '{key}'. Known settings: {known}")
        config[key] = value

    for key in ("block_indent_offset", "content_indent_offset"):
        if not isinstance(config[key], int) or config[key] < 0:
            raise ConfigError(f"Setting '{key}' must be a non-negative integer, got {config[key]!r}")

    return config


def validate_extension(extension: str) -> str:
    """
    Validate a file extension and return its language.

    Args:
        extension: File extension (e.g., '.ts', '.tsx')

    Returns:
        The grammar name for the extension.

    Raises:
        ConfigError: If the extension is not supported.
    """
    extension = extension.lower()
    if extension not in SUPPORTED_LANGUAGES:
        supported = ", ".join(SUPPORTED_LANGUAGES.keys())
        raise ConfigError(
            f"File extension '{extension}' is not supported. Supported extensions: {supported}"
        )

    return SUPPORTED_LANGUAGES[extension]
