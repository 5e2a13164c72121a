"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from solid_showcase.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("$TEST_VAR") == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("${TEST_VAR}/subdir") == "/test/path/subdir"

    def test_expand_nonexistent_env_var(self):
        """Unknown variables are left untouched."""
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("NONEXISTENT_VAR", None)
            assert expand_env_vars("$NONEXISTENT_VAR") == "$NONEXISTENT_VAR"

    def test_expand_nested_dict_and_list_values(self):
        with patch.dict(os.environ, {"LOG_ROOT": "/var/log"}):
            config = {
                "logging": {"file_path": "$LOG_ROOT/showcase.log"},
                "paths": ["$LOG_ROOT/a", "plain"],
            }
            assert expand_env_vars(config) == {
                "logging": {"file_path": "/var/log/showcase.log"},
                "paths": ["/var/log/a", "plain"],
            }

    def test_expand_non_string_values(self):
        config = {"number": 42, "boolean": True, "none": None}
        assert expand_env_vars(config) == config

    def test_expand_config_env_vars(self):
        with patch.dict(os.environ, {"SHOWCASE_BACKEND": "local"}):
            result = expand_config_env_vars({"demo": {"data_source": "${SHOWCASE_BACKEND}"}})
            assert result["demo"]["data_source"] == "local"
