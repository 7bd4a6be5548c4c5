"""
Tests for migration configuration and supported extensions.
"""

import pytest

from reactive_unwrap.config import MIGRATION_CONFIG, get_migration_config, validate_extension
from reactive_unwrap.exceptions import ConfigError, ReactiveUnwrapError

pytestmark = pytest.mark.fast


class TestValidateExtension:

    @pytest.mark.parametrize("extension, language", [
        (".ts", "typescript"),
        (".mts", "typescript"),
        (".cts", "typescript"),
        (".tsx", "tsx"),
        (".TS", "typescript"),
    ])
    def test_supported(self, extension, language):
        assert validate_extension(extension) == language

    @pytest.mark.parametrize("extension", [".js", ".py", ""])
    def test_unsupported(self, extension):
        with pytest.raises(ConfigError, match="not supported"):
            validate_extension(extension)


class TestGetMigrationConfig:

    def test_defaults(self):
        config = get_migration_config()
        assert config == MIGRATION_CONFIG
        assert config is not MIGRATION_CONFIG

    def test_override(self):
        config = get_migration_config({"block_indent_offset": 4})
        assert config["block_indent_offset"] == 4
        assert MIGRATION_CONFIG["block_indent_offset"] == 2

    def test_unknown_setting(self):
        with pytest.raises(ConfigError, match="Unknown migration setting"):
            get_migration_config({"indent": 4})

    @pytest.mark.parametrize("value", [-1, "2", 1.5])
    def test_invalid_offset(self, value):
        with pytest.raises(ConfigError):
            get_migration_config({"content_indent_offset": value})

    def test_config_error_is_an_application_error(self):
        assert issubclass(ConfigError, ReactiveUnwrapError)
