"""Tests for archive handles and multi-source lookup."""

from pathlib import Path

import pytest

from archives import MemoryArchive
from mcassets.sources import DirectoryArchive, SourceSet, ZipArchive, open_archive

PATH = "assets/minecraft/models/block/stone.json"


class TestReadFile:
    """Test fallback order of SourceSet.read_file."""

    @pytest.mark.anyio
    async def test_primary_wins_over_auxiliary(self) -> None:
        sources = SourceSet(MemoryArchive({PATH: b"primary"}))
        sources.register_source("mod", MemoryArchive({PATH: b"aux"}))

        assert await sources.read_file(PATH) == b"primary"

    @pytest.mark.anyio
    async def test_falls_back_to_matching_auxiliary(self) -> None:
        sources = SourceSet(MemoryArchive())
        sources.register_source("empty_a", MemoryArchive())
        sources.register_source("holder", MemoryArchive({PATH: b"aux"}))
        sources.register_source("empty_b", MemoryArchive())

        assert await sources.read_file(PATH) == b"aux"

    @pytest.mark.anyio
    async def test_registration_order_decides_between_auxiliaries(self) -> None:
        sources = SourceSet(MemoryArchive())
        sources.register_source("first", MemoryArchive({PATH: b"first"}))
        sources.register_source("second", MemoryArchive({PATH: b"second"}))

        assert await sources.read_file(PATH) == b"first"

    @pytest.mark.anyio
    async def test_missing_everywhere_returns_none(self) -> None:
        sources = SourceSet(MemoryArchive())
        sources.register_source("mod", MemoryArchive())

        assert await sources.read_file(PATH) is None

    @pytest.mark.anyio
    async def test_empty_file_counts_as_missing(self) -> None:
        sources = SourceSet(MemoryArchive({PATH: b""}))
        sources.register_source("mod", MemoryArchive({PATH: b"aux"}))

        assert await sources.read_file(PATH) == b"aux"

    @pytest.mark.anyio
    async def test_reregistering_key_replaces_handle(self) -> None:
        sources = SourceSet(MemoryArchive())
        sources.register_source("mod", MemoryArchive({PATH: b"old"}))
        sources.register_source("other", MemoryArchive({PATH: b"other"}))
        sources.register_source("mod", MemoryArchive({PATH: b"new"}))

        assert sources.keys == ["mod", "other"]
        assert await sources.read_file(PATH) == b"new"


class TestListEntries:
    """Test fallback order of SourceSet.list_entries."""

    @pytest.mark.anyio
    async def test_empty_primary_listing_falls_back(self) -> None:
        sources = SourceSet(MemoryArchive({"assets/other/x.json": b"{}"}))
        sources.register_source("mod", MemoryArchive({PATH: b"{}"}))

        entries = await sources.list_entries("assets/minecraft/models/")
        assert [entry.name for entry in entries] == [PATH]

    @pytest.mark.anyio
    async def test_no_listing_anywhere_returns_empty(self) -> None:
        sources = SourceSet(MemoryArchive())
        assert await sources.list_entries("assets/") == []


class TestClose:
    @pytest.mark.anyio
    async def test_close_closes_only_primary(self) -> None:
        primary = MemoryArchive()
        aux = MemoryArchive()
        sources = SourceSet(primary)
        sources.register_source("mod", aux)

        await sources.close()

        assert primary.closed
        assert not aux.closed


class TestArchiveHandles:
    """Test the zip and directory archive handles."""

    @pytest.mark.anyio
    async def test_zip_archive_reads_and_lists(self, write_zip) -> None:
        path = write_zip("client.jar", {PATH: b"{}", "assets/minecraft/lang/en_us.json": b"{}"})
        archive = ZipArchive(path)

        assert await archive.read(PATH) == b"{}"
        entries = await archive.entries("assets/minecraft/models/")
        assert [entry.name for entry in entries] == [PATH]
        with pytest.raises(KeyError):
            await archive.read("assets/minecraft/missing.json")

        await archive.close()

    @pytest.mark.anyio
    async def test_directory_archive_reads_and_lists(self, tmp_path: Path) -> None:
        file = tmp_path / PATH
        file.parent.mkdir(parents=True)
        file.write_bytes(b"{}")

        archive = open_archive(tmp_path)
        assert isinstance(archive, DirectoryArchive)
        assert await archive.read(PATH) == b"{}"
        entries = await archive.entries("assets/minecraft/models/block/")
        assert [entry.name for entry in entries] == [PATH]
        with pytest.raises(FileNotFoundError):
            await archive.read("assets/minecraft/missing.json")

    @pytest.mark.anyio
    async def test_directory_archive_rejects_escaping_paths(self, tmp_path: Path) -> None:
        archive = DirectoryArchive(tmp_path)
        with pytest.raises(FileNotFoundError):
            await archive.read("../outside.json")

    @pytest.mark.anyio
    async def test_source_set_opens_paths(self, write_zip) -> None:
        primary = write_zip("client.jar", {})
        pack = write_zip("pack.zip", {PATH: b"pack"})
        sources = SourceSet(primary)
        sources.register_source("pack", pack)

        assert "pack" in sources
        assert await sources.read_file(PATH) == b"pack"
        await sources.close()
