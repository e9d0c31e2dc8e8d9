"""
Data models for packaged assets.

Contains type definitions, document keys and path conventions used
throughout the assets package. Keeps a dict-based approach for parsed
documents while providing clear type hints, plus small dataclasses for
the records handed to callers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TypeAlias, Union

from .identifiers import Identifier

# Type aliases for clarity
Node: TypeAlias = Union[Dict[str, "Node"], List["Node"], str, int, float, bool, None]
"""Any value of a parsed JSON document."""

Document: TypeAlias = Dict[str, Any]
"""A parsed document whose top level is a mapping."""

ModelDescriptor: TypeAlias = Dict[str, Any]
"""A model document with its parent chain merged in."""

Variant: TypeAlias = Dict[str, Any]
"""One block state variant: a ``model`` reference plus display fields."""


# Keys of model documents
PARENT_KEY = "parent"
PARENTS_KEY = "parents"
BLOCK_NAME_KEY = "blockName"
DISPLAY_KEY = "display"
GUI_KEY = "gui"
VARIANT_KEY = "variant"

# Keys of block state documents
VARIANTS_KEY = "variants"
MULTIPART_KEY = "multipart"
APPLY_KEY = "apply"
MODEL_KEY = "model"
DEFAULT_VARIANT = ""

# Model every chain falls back to when it declares no GUI display data
ROOT_MODEL = "minecraft:block/block"
# Models under this area are provided by the game, not by files
BUILTIN_PREFIX = "builtin/"

JSON_EXTENSION = ".json"
TEXTURE_EXTENSION = ".png"
METADATA_EXTENSION = ".mcmeta"


def blockstates_dir(namespace: str) -> str:
    return f"assets/{namespace}/blockstates/"


def blockstate_path(identifier: Identifier) -> str:
    return f"{blockstates_dir(identifier.namespace)}{identifier.local_id}{JSON_EXTENSION}"


def block_models_dir(namespace: str) -> str:
    return f"assets/{namespace}/models/block/"


def model_path(identifier: Identifier) -> str:
    """Path of a model file; bare ids live under the ``block/`` area."""
    local_id = identifier.local_id
    if "/" not in local_id:
        local_id = f"block/{local_id}"
    return f"assets/{identifier.namespace}/models/{local_id}{JSON_EXTENSION}"


def texture_path(identifier: Identifier) -> str:
    return f"assets/{identifier.namespace}/textures/{identifier.local_id}{TEXTURE_EXTENSION}"


def texture_metadata_path(identifier: Identifier) -> str:
    return texture_path(identifier) + METADATA_EXTENSION


@dataclass
class BlockState:
    """A parsed block state document stamped with its identifier."""

    identifier: Identifier
    variants: Dict[str, Any] = field(default_factory=dict)
    multipart: List[Any] = field(default_factory=list)

    @property
    def name(self) -> str:
        return str(self.identifier)


@dataclass
class AnimationMeta:
    """Animation section of a texture's ``.mcmeta`` sidecar.

    ``frames`` is either None (play every frame of the strip in order) or
    a list of frame indices and ``{"index", "time"}`` mappings.
    """

    frametime: int = 1
    interpolate: bool = False
    frames: Optional[List[Union[int, Dict[str, int]]]] = None
    width: Optional[int] = None
    height: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnimationMeta":
        """Create AnimationMeta from the ``animation`` JSON mapping.

        Args:
            data: Mapping found under the ``animation`` key

        Returns:
            AnimationMeta instance

        Raises:
            ValueError: if a field or frame entry has the wrong type
            KeyError: if a frame mapping has no ``index``
        """
        frames = data.get("frames")
        if frames is not None and not isinstance(frames, list):
            raise ValueError(f"frames must be a list, got {type(frames).__name__}")
        return cls(
            frametime=int(data.get("frametime", 1)),
            interpolate=bool(data.get("interpolate", False)),
            frames=[cls._frame_from_json(frame) for frame in frames] if frames is not None else None,
            width=int(data["width"]) if "width" in data else None,
            height=int(data["height"]) if "height" in data else None,
        )

    @staticmethod
    def _frame_from_json(frame: Any) -> Union[int, Dict[str, int]]:
        """Normalize one frame entry: a plain index or an ``{index, time}`` mapping."""
        if isinstance(frame, dict):
            normalized = {"index": int(frame["index"])}
            if "time" in frame:
                normalized["time"] = int(frame["time"])
            return normalized
        if isinstance(frame, int) and not isinstance(frame, bool):
            return frame
        raise ValueError(f"Invalid animation frame: {frame!r}")

    def frame_times(self, frame_count: int) -> List[tuple[int, int]]:
        """Return ``(frame index, duration in ticks)`` pairs for playback.

        Args:
            frame_count: Number of frames in the texture strip, used when
                         the metadata does not list frames explicitly
        """
        if self.frames is None:
            return [(index, self.frametime) for index in range(frame_count)]

        result: List[tuple[int, int]] = []
        for frame in self.frames:
            if isinstance(frame, dict):
                result.append((int(frame["index"]), int(frame.get("time", self.frametime))))
            else:
                result.append((int(frame), self.frametime))
        return result
