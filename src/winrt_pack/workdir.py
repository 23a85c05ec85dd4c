"""Switch into the project directory before anything else runs."""

from __future__ import annotations

import os

from winrt_pack.errors import DirectoryChangeError


def enter_directory(path: str) -> None:
    """chdir into path. Relative paths used later (nuget/, winrt-pack.yaml) depend on it."""
    print(f"Using {path}...")
    try:
        os.chdir(path)
    except OSError as e:
        raise DirectoryChangeError(path, e.strerror or str(e)) from e
