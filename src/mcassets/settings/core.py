"""
Core settings management for mcassets.
"""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QSettings

from .types import ConfigVersion, ValidationResult
from .migration import SettingsMigrator
from .validation import SettingsValidator
from .paths import PathSettings
from .packs import PackSettings
from .resolver import ResolverSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to settings with automatic cross-platform
    storage and validation. Pass ``settings_file`` to keep everything in a
    single INI file instead of the platform store.
    """

    def __init__(self, profile: str = "default", settings_file: Optional[str | Path] = None):
        """Initialize settings with organization, application name, and profile.

        Args:
            profile: Settings profile name (default: "default")
            settings_file: Optional INI file to use instead of the platform store
        """
        if settings_file is not None:
            self.settings = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings("mcassets", "mcassets")
        self.profile = profile

        # Use profile as a group to create hierarchy: mcassets/mcassets/default/...
        self.settings.beginGroup(profile)

        # Initialize subsystems
        self._migrator = SettingsMigrator(self.settings)
        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._packs = PackSettings(self.settings)
        self._resolver = ResolverSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        # Ensure version and migrate if needed
        self._migrator.ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def paths(self) -> PathSettings:
        """Access path settings subsystem."""
        return self._paths

    @property
    def packs(self) -> PackSettings:
        """Access auxiliary pack settings subsystem."""
        return self._packs

    @property
    def resolver(self) -> ResolverSettings:
        """Access resolver settings subsystem."""
        return self._resolver

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    @property
    def version(self) -> str:
        """Get configuration version."""
        value = self.settings.value("app/version", ConfigVersion.CURRENT.value)
        return str(value) if value is not None else ConfigVersion.CURRENT.value

    # === PATH SETTINGS (DELEGATED) ===

    @property
    def primary_archive(self) -> Optional[Path]:
        """Get the primary archive path."""
        return self._paths.primary_archive

    @primary_archive.setter
    def primary_archive(self, value: Optional[Path]) -> None:
        self._paths.primary_archive = value

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    def get_settings_file_path(self) -> str:
        """Get path to the settings storage."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
