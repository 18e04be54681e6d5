"""Unit tests for Settings (express_setup.config).

Tests cover:
- Defaults and derived commands
- Validation of package manager and timeout
- from_env with and without overrides
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from express_setup.config import Settings

pytestmark = pytest.mark.unit


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.package_manager == "npm"
        assert settings.install_timeout is None

    def test_install_command(self):
        assert Settings().install_command == ["npm", "install"]
        assert Settings(package_manager="pnpm").install_command == ["pnpm", "install"]

    def test_dev_command(self):
        assert Settings(package_manager="yarn").dev_command == "yarn run dev"

    def test_empty_package_manager_rejected(self):
        with pytest.raises(ValidationError):
            Settings(package_manager="")

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValidationError):
            Settings(install_timeout=0)


class TestFromEnv:
    def test_no_env(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()
        assert settings == Settings()

    def test_overrides(self):
        env = {
            "EXPRESS_SETUP_PACKAGE_MANAGER": "pnpm",
            "EXPRESS_SETUP_INSTALL_TIMEOUT": "90",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        assert settings.package_manager == "pnpm"
        assert settings.install_timeout == 90.0

    def test_empty_values_ignored(self):
        env = {"EXPRESS_SETUP_PACKAGE_MANAGER": "", "EXPRESS_SETUP_INSTALL_TIMEOUT": ""}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        assert settings.package_manager == "npm"
        assert settings.install_timeout is None
