"""
Auxiliary pack settings for mcassets.

Packs are stored as a QSettings array of ``key``/``path`` pairs so their
order survives a round trip through every storage format.
"""

from pathlib import Path
from typing import List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

PackEntry = Tuple[str, Path]


class PackSettings:
    """Manages the ordered list of auxiliary packs."""

    ARRAY_KEY = "packs"

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    @property
    def packs(self) -> List[PackEntry]:
        """Get registered packs in lookup order."""
        result: List[PackEntry] = []
        size = self.settings.beginReadArray(self.ARRAY_KEY)
        try:
            for index in range(size):
                self.settings.setArrayIndex(index)
                key = str(self.settings.value("key", ""))
                path = str(self.settings.value("path", ""))
                if key and path:
                    result.append((key, Path(path)))
        finally:
            self.settings.endArray()
        return result

    @packs.setter
    def packs(self, value: List[PackEntry]) -> None:
        """Replace the registered packs."""
        self.settings.remove(self.ARRAY_KEY)
        self.settings.beginWriteArray(self.ARRAY_KEY, len(value))
        try:
            for index, (key, path) in enumerate(value):
                self.settings.setArrayIndex(index)
                self.settings.setValue("key", key)
                self.settings.setValue("path", str(path))
        finally:
            self.settings.endArray()
        self.settings.sync()

    @property
    def keys(self) -> List[str]:
        return [key for key, _ in self.packs]

    def add_pack(self, key: str, path: str | Path) -> None:
        """Register a pack; an existing key keeps its position and gets the new path."""
        packs = self.packs
        for index, (existing, _) in enumerate(packs):
            if existing == key:
                packs[index] = (key, Path(path))
                break
        else:
            packs.append((key, Path(path)))
        self.packs = packs

    def remove_pack(self, key: str) -> bool:
        """Remove a pack. Returns True if it was registered."""
        packs = self.packs
        remaining = [(k, p) for k, p in packs if k != key]
        if len(remaining) == len(packs):
            return False
        self.packs = remaining
        return True

    def move_pack_up(self, key: str) -> bool:
        """Move pack up in priority (towards beginning of list).

        Returns:
            True if pack was moved, False if it was already at the top or not found.
        """
        packs = self.packs
        keys = [k for k, _ in packs]
        if key not in keys:
            return False
        index = keys.index(key)
        if index == 0:
            return False
        packs[index], packs[index - 1] = packs[index - 1], packs[index]
        self.packs = packs
        return True

    def move_pack_down(self, key: str) -> bool:
        """Move pack down in priority (towards end of list).

        Returns:
            True if pack was moved, False if it was already at the bottom or not found.
        """
        packs = self.packs
        keys = [k for k, _ in packs]
        if key not in keys:
            return False
        index = keys.index(key)
        if index == len(packs) - 1:
            return False
        packs[index], packs[index + 1] = packs[index + 1], packs[index]
        self.packs = packs
        return True

    def clear_packs(self) -> None:
        """Clear all packs."""
        self.packs = []
