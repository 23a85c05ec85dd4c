"""Locate the single .nuspec and the VERSION file in the package-description directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from winrt_pack.errors import (
    AmbiguousDescriptor,
    MissingVersionFile,
    NoDescriptorFound,
    NoPackageDirectory,
    UnreadablePackageDirectory,
    UnreadableVersionFile,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageDescriptor:
    nuspec: Path
    version: str


def files_with_extension(folder: Path, ext: str) -> list[Path]:
    """Regular files directly in folder whose suffix is exactly .ext (case-sensitive), sorted.

    Raises UnreadablePackageDirectory if folder cannot be listed.
    """
    suffix = "." + ext.lstrip(".")
    try:
        return sorted(p for p in folder.iterdir() if p.suffix == suffix and p.is_file())
    except OSError as e:
        raise UnreadablePackageDirectory(folder, e.strerror or str(e)) from e


def find_nuspec(nuget_dir: Path, ext: str = "nuspec") -> Path:
    """Return the one descriptor in nuget_dir. Zero or several is fatal."""
    paths = files_with_extension(nuget_dir, ext)
    if not paths:
        raise NoDescriptorFound(nuget_dir, ext)
    if len(paths) > 1:
        raise AmbiguousDescriptor(nuget_dir, ext, len(paths))
    return paths[0]


def read_version(nuget_dir: Path, version_file: str = "VERSION") -> str:
    """Full text of the version file, verbatim: no strip, no newline translation.

    A version path that exists but is not a readable file (e.g. a directory) is
    UnreadableVersionFile; only a missing path is MissingVersionFile.
    """
    path = nuget_dir / version_file
    try:
        with path.open(encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError as e:
        raise MissingVersionFile(path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableVersionFile(path, str(e)) from e


def resolve_descriptor(
    nuget_dir: Path,
    ext: str = "nuspec",
    version_file: str = "VERSION",
) -> PackageDescriptor:
    """Check the directory, then find the descriptor, then read the version. Never cached."""
    if not nuget_dir.is_dir():
        raise NoPackageDirectory(nuget_dir)
    nuspec = find_nuspec(nuget_dir, ext)
    version = read_version(nuget_dir, version_file)
    log.debug("Resolved descriptor %s, version %r", nuspec, version)
    return PackageDescriptor(nuspec=nuspec, version=version)
