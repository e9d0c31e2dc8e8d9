import os
from pathlib import Path

import pytest

from mcassets.assets import AssetService

MINECRAFT_JAR = os.environ.get("MINECRAFT_JAR") or "client.jar"


@pytest.mark.anyio
@pytest.mark.skipif(not Path(MINECRAFT_JAR).exists(), reason="Minecraft client jar not found")
async def test_resolved_model_stone():
    async with AssetService.open(MINECRAFT_JAR) as service:
        stone = await service.get_model("minecraft:block/stone")
        assert stone["parents"][0] == "minecraft:block/cube_all"
        assert stone["textures"]["all"] == "minecraft:block/stone"
        print(f"✓ stone resolved: {stone}")


@pytest.mark.anyio
@pytest.mark.skipif(not Path(MINECRAFT_JAR).exists(), reason="Minecraft client jar not found")
async def test_every_block_state_resolves():
    async with AssetService.open(MINECRAFT_JAR) as service:
        names = await service.block_states.get_block_state_names()
        models = await service.get_block_models()
        assert names, "no block states found"
        assert len(models) > len(names) * 0.9
        print(f"✓ resolved {len(models)} of {len(names)} block states")
