"""
Path-related settings for mcassets.
"""

from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class PathSettings:
    """Manages path-related settings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    @property
    def primary_archive(self) -> Optional[Path]:
        """Get the primary archive (game jar or pack directory) path."""
        path_str = self._get_str("paths/primary_archive", "")
        return Path(path_str) if path_str else None

    @primary_archive.setter
    def primary_archive(self, value: Optional[Path]) -> None:
        """Set the primary archive path."""
        self.settings.setValue("paths/primary_archive", str(value) if value else "")
        self.settings.sync()
