"""NuGet packaging: resolve nuget/*.nuspec and nuget/VERSION, then run `nuget pack`."""

from .descriptor import (
    PackageDescriptor,
    files_with_extension,
    find_nuspec,
    read_version,
    resolve_descriptor,
)
from .pack import pack, pack_command

__all__ = [
    "PackageDescriptor",
    "files_with_extension",
    "find_nuspec",
    "pack",
    "pack_command",
    "read_version",
    "resolve_descriptor",
]
