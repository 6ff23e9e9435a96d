"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from solid_principles.config.env_expansion import expand_env_vars


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
        assert expand_env_vars("$NONEXISTENT_SOLID_VAR") == "$NONEXISTENT_SOLID_VAR"

    def test_expand_nested_values(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "logging": {"file_path": "$TEST_VAR/app.log", "max_size_mb": 5},
                "paths": ["$TEST_VAR", "plain"],
            }
            assert expand_env_vars(config) == {
                "logging": {"file_path": "/test/path/app.log", "max_size_mb": 5},
                "paths": ["/test/path", "plain"],
            }

    def test_non_string_values_unchanged(self):
        assert expand_env_vars(42) == 42
        assert expand_env_vars(None) is None
