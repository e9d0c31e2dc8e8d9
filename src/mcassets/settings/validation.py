"""
Settings validation system for mcassets.
"""

import logging
from typing import List, TYPE_CHECKING

from .resolver import NAMESPACE_PATTERN
from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        # Validate primary archive
        primary = self.settings.primary_archive
        if primary:
            if not primary.exists():
                errors.append(f"Primary archive does not exist: {primary}")
        else:
            warnings.append("Primary archive not set")

        # Validate auxiliary packs
        for key, path in self.settings.packs.packs:
            if not path.exists():
                warnings.append(f"Pack '{key}' no longer exists: {path}")

        namespace = self.settings.resolver.default_namespace
        if not NAMESPACE_PATTERN.match(namespace):
            errors.append(f"Invalid default namespace: {namespace}")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
