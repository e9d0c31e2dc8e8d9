"""Tests for the AssetService facade: batches, rendering and lifecycle."""

from typing import Any, List

import pytest

from archives import MemoryArchive
from mcassets.assets import AssetService, ModelDescriptor, RenderError


class RecordingRenderer:
    """Renderer that records calls and fails on chosen blocks."""

    def __init__(self, fail_on: tuple[str, ...] = ()):
        self.fail_on = fail_on
        self.calls: List[str] = []

    async def prepare(self, options: dict[str, Any]) -> str:
        self.calls.append("prepare")
        return f"handle:{options.get('size', 0)}"

    async def render(self, context: AssetService, model: ModelDescriptor) -> str:
        name = model["blockName"]
        self.calls.append(f"render {name}")
        if name in self.fail_on:
            raise ValueError(f"cannot draw {name}")
        texture = model.get("textures", {}).get("all")
        if texture:
            await context.get_texture_file(texture)
        return f"image of {name}"

    async def destroy(self, handle: Any) -> None:
        self.calls.append(f"destroy {handle}")


class TestBatchResolution:
    """Test per-item failure isolation in batch operations."""

    @pytest.mark.anyio
    async def test_block_name_list(self, service: AssetService) -> None:
        names = await service.get_block_name_list()
        assert set(names) == {
            "minecraft:block",
            "minecraft:cube",
            "minecraft:cube_all",
            "minecraft:stone",
            "minecraft:dirt",
        }

    @pytest.mark.anyio
    async def test_broken_model_does_not_abort_batch(self, primary: MemoryArchive) -> None:
        primary.add("assets/minecraft/models/block/broken.json", {"parent": "block/missing"})
        service = AssetService.open(primary)

        models = await service.get_block_list()

        names = {model["blockName"] for model in models}
        assert "minecraft:broken" not in names
        assert {"minecraft:stone", "minecraft:dirt", "minecraft:cube"} <= names

    @pytest.mark.anyio
    async def test_broken_block_state_does_not_abort_batch(self, primary: MemoryArchive) -> None:
        primary.add("assets/minecraft/blockstates/gone.json", {"variants": {"": {"model": "block/gone"}}})
        service = AssetService.open(primary)

        models = await service.get_block_models()

        assert sorted(model["blockName"] for model in models) == ["minecraft:dirt", "minecraft:stone"]

    @pytest.mark.anyio
    async def test_namespace_override(self, service: AssetService) -> None:
        service.register_source(
            "mymod",
            MemoryArchive(
                {
                    "assets/mymod/models/block/gem.json": {"parent": "block/cube_all", "textures": {"all": "mymod:block/gem"}},
                    "assets/mymod/blockstates/gem.json": {"variants": {"": {"model": "mymod:block/gem"}}},
                }
            ),
        )

        models = await service.get_block_models("mymod")

        assert [model["blockName"] for model in models] == ["mymod:gem"]
        assert models[0]["parents"] == ["block/cube_all", "block/cube", "block/block"]


class TestRendering:
    """Test the render loop lifecycle."""

    @pytest.mark.anyio
    async def test_render_yields_outputs_in_order(self, primary: MemoryArchive) -> None:
        renderer = RecordingRenderer()
        service = AssetService.open(primary, renderer=renderer)
        blocks = [await service.get_model("stone"), await service.get_model("dirt")]

        outputs = [output async for output in service.render(blocks, {"size": 64})]

        assert outputs == ["image of stone", "image of dirt"]
        assert renderer.calls == ["prepare", "render stone", "render dirt", "destroy handle:64"]
        assert service.get_renderer() is None

    @pytest.mark.anyio
    async def test_failed_render_skips_block(self, primary: MemoryArchive) -> None:
        renderer = RecordingRenderer(fail_on=("stone",))
        service = AssetService.open(primary, renderer=renderer)
        blocks = [await service.get_model("stone"), await service.get_model("dirt")]

        outputs = [output async for output in service.render(blocks)]

        assert outputs == ["image of dirt"]
        assert renderer.calls[-1] == "destroy handle:0"

    @pytest.mark.anyio
    async def test_render_single_raises_render_error(self, primary: MemoryArchive) -> None:
        renderer = RecordingRenderer(fail_on=("stone",))
        service = AssetService.open(primary, renderer=renderer)

        with pytest.raises(RenderError) as exc_info:
            await service.render_single(await service.get_model("stone"))
        assert exc_info.value.block_name == "stone"

    @pytest.mark.anyio
    async def test_teardown_runs_when_loop_is_abandoned(self, primary: MemoryArchive) -> None:
        renderer = RecordingRenderer()
        service = AssetService.open(primary, renderer=renderer)
        blocks = [await service.get_model("stone"), await service.get_model("dirt")]

        stream = service.render(blocks)
        async for _ in stream:
            break
        await stream.aclose()

        assert renderer.calls == ["prepare", "render stone", "destroy handle:0"]

    @pytest.mark.anyio
    async def test_missing_renderer_is_render_error(self, service: AssetService) -> None:
        with pytest.raises(RenderError):
            await service.render_single({"blockName": "stone"})


class TestLifecycle:
    @pytest.mark.anyio
    async def test_context_manager_closes_primary(self, primary: MemoryArchive) -> None:
        async with AssetService.open(primary) as service:
            assert await service.get_file("assets/minecraft/textures/block/stone.png")
        assert primary.closed

    @pytest.mark.anyio
    async def test_get_parsed_json_returns_copies(self, service: AssetService) -> None:
        path = "assets/minecraft/blockstates/stone.json"
        first = await service.get_parsed_json(path)
        second = await service.get_parsed_json(path)
        assert first == second
        assert first is not second

    def test_parse_and_clone_helpers(self) -> None:
        parsed = AssetService.parse_json(b'{"a": [1]}')
        assert parsed == {"a": [1]}
        assert AssetService.clone(parsed) == parsed
