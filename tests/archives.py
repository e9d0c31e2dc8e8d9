"""In-memory archive and sample asset files shared by the tests."""

from typing import Any, Dict, List

import orjson

from mcassets.sources import ArchiveEntry


def json_bytes(data: Any) -> bytes:
    return orjson.dumps(data)


class MemoryArchive:
    """Archive handle holding its files in a dict."""

    def __init__(self, files: Dict[str, Any] | None = None):
        self.files: Dict[str, bytes] = {}
        for path, content in (files or {}).items():
            self.add(path, content)
        self.closed = False
        self.reads: List[str] = []

    def add(self, path: str, content: Any) -> None:
        if isinstance(content, (bytes, str)):
            self.files[path] = content.encode("utf-8") if isinstance(content, str) else content
        else:
            self.files[path] = json_bytes(content)

    async def read(self, path: str) -> bytes:
        self.reads.append(path)
        return self.files[path]

    async def entries(self, prefix: str) -> List[ArchiveEntry]:
        return [ArchiveEntry(name) for name in self.files if name.startswith(prefix)]

    async def close(self) -> None:
        self.closed = True


ROOT_BLOCK_MODEL = {
    "gui_light": "side",
    "display": {
        "gui": {"rotation": [30, 225, 0], "translation": [0, 0, 0], "scale": [0.625, 0.625, 0.625]},
        "ground": {"rotation": [0, 0, 0], "translation": [0, 3, 0], "scale": [0.25, 0.25, 0.25]},
    },
}


def vanilla_files() -> Dict[str, Any]:
    """A small, well-formed slice of the vanilla block assets."""
    return {
        "assets/minecraft/models/block/block.json": ROOT_BLOCK_MODEL,
        "assets/minecraft/models/block/cube.json": {
            "parent": "block/block",
            "elements": [{"from": [0, 0, 0], "to": [16, 16, 16]}],
        },
        "assets/minecraft/models/block/cube_all.json": {
            "parent": "block/cube",
            "textures": {"particle": "#all", "down": "#all", "up": "#all"},
        },
        "assets/minecraft/models/block/stone.json": {
            "parent": "minecraft:block/cube_all",
            "textures": {"all": "minecraft:block/stone"},
        },
        "assets/minecraft/models/block/dirt.json": {
            "parent": "minecraft:block/cube_all",
            "textures": {"all": "minecraft:block/dirt"},
        },
        "assets/minecraft/blockstates/stone.json": {
            "variants": {"": {"model": "minecraft:block/stone"}},
        },
        "assets/minecraft/blockstates/dirt.json": {
            "variants": {"": [{"model": "minecraft:block/dirt"}, {"model": "minecraft:block/dirt", "y": 90}]},
        },
        "assets/minecraft/textures/block/stone.png": b"\x89PNG stone",
        "assets/minecraft/textures/block/dirt.png": b"\x89PNG dirt",
    }


