"""
Resolver settings for mcassets.
"""

import logging
import re
from typing import TYPE_CHECKING

from ..assets.identifiers import DEFAULT_NAMESPACE
from ..assets.models import ROOT_MODEL

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

NAMESPACE_PATTERN = re.compile(r"^[a-z0-9_.-]+$")


class ResolverSettings:
    """Manages defaults used when resolving asset names."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value else default

    @property
    def default_namespace(self) -> str:
        """Namespace used for names without a ``namespace:`` prefix."""
        return self._get_str("resolver/default_namespace", DEFAULT_NAMESPACE)

    @default_namespace.setter
    def default_namespace(self, value: str) -> None:
        """Set the default namespace (lowercase letters, digits, ``_.-``)."""
        if NAMESPACE_PATTERN.match(value):
            self.settings.setValue("resolver/default_namespace", value)
            self.settings.sync()
        else:
            logger.warning(
                f"Invalid namespace: {value}, keeping current: {self.default_namespace}"
            )

    @property
    def root_model(self) -> str:
        """Model inherited by chains that declare no GUI display data."""
        return self._get_str("resolver/root_model", ROOT_MODEL)

    @root_model.setter
    def root_model(self, value: str) -> None:
        self.settings.setValue("resolver/root_model", value)
        self.settings.sync()
