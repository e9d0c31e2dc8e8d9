"""Shared fixtures: in-memory archives and services built on them."""

import zipfile
from pathlib import Path
from typing import Any, Dict

import pytest

from archives import MemoryArchive, json_bytes, vanilla_files
from mcassets.assets import AssetService


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def primary() -> MemoryArchive:
    return MemoryArchive(vanilla_files())


@pytest.fixture
def service(primary: MemoryArchive) -> AssetService:
    return AssetService.open(primary)


@pytest.fixture
def write_zip(tmp_path: Path):
    """Write a zip file with the given files and return its path."""

    def _write(name: str, files: Dict[str, Any]) -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as zf:
            for entry, content in files.items():
                if not isinstance(content, (bytes, str)):
                    content = json_bytes(content)
                zf.writestr(entry, content)
        return path

    return _write
