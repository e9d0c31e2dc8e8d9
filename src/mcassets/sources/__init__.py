"""
Archive access for mcassets.

Provides archive handles for jar/zip files and unpacked pack directories,
and SourceSet, which reads through a primary archive plus auxiliary ones.
"""

from .archive import ArchiveEntry, ArchiveHandle, ZipArchive, DirectoryArchive, open_archive
from .source_set import SourceSet

__all__ = [
    "ArchiveEntry",
    "ArchiveHandle",
    "ZipArchive",
    "DirectoryArchive",
    "open_archive",
    "SourceSet",
]
