"""Invoke `nuget pack <nuspec> -version <version>` once."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from winrt_pack.errors import PackFailed
from winrt_pack.nuget.descriptor import PackageDescriptor

log = logging.getLogger(__name__)


def pack_command(nuspec: Path, version: str, nuget: str = "nuget") -> list[str]:
    return [nuget, "pack", str(nuspec), "-version", version]


def pack(descriptor: PackageDescriptor, nuget: str = "nuget") -> None:
    """Run nuget pack. Raises PackFailed on non-zero exit or if nuget cannot be started. No retry."""
    print("Packing...")
    cmd = pack_command(descriptor.nuspec, descriptor.version, nuget)
    log.debug("Running %s", cmd)
    try:
        r = subprocess.run(cmd)
    except (OSError, ValueError) as e:
        raise PackFailed(descriptor.nuspec, f"could not run {nuget}: {e}") from e
    if r.returncode != 0:
        raise PackFailed(descriptor.nuspec, f"exit code {r.returncode}")
