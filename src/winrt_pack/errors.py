"""Failure taxonomy for winrt-pack. Every error is fatal for the run.

Modules raise these; pipeline.run is the only place that catches WinrtPackError,
prints the message and turns it into a non-zero return code.
"""

from __future__ import annotations

from pathlib import Path


class WinrtPackError(Exception):
    """Base for every fatal condition."""


class ParseError(WinrtPackError):
    """Malformed command-line input, reported before any action runs."""


class UnrecognizedPlatform(ParseError):
    def __init__(self, token: str, accepted: list[str]) -> None:
        self.token = token
        self.accepted = accepted
        super().__init__(f"Invalid platform {token!r}! Expecting: {', '.join(accepted)}.")


class ConfigError(WinrtPackError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid config {path}: {reason}")


class DirectoryChangeError(WinrtPackError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to set the current directory to {path}: {reason}")


class BuildFailed(WinrtPackError):
    def __init__(self, target: str, reason: str | None = None) -> None:
        self.target = target
        msg = f"Failed to build '{target}' target!"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class NoPackageDirectory(WinrtPackError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"No {path} directory found!")


class UnreadablePackageDirectory(WinrtPackError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to look for descriptor files in {path}: {reason}")


class NoDescriptorFound(WinrtPackError):
    def __init__(self, path: Path, extension: str) -> None:
        self.path = path
        super().__init__(f"No .{extension} files found in {path}!")


class AmbiguousDescriptor(WinrtPackError):
    def __init__(self, path: Path, extension: str, count: int) -> None:
        self.path = path
        self.count = count
        super().__init__(f"Too many .{extension} files found in {path}: {count} (expected 1)!")


class MissingVersionFile(WinrtPackError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Failed to open version file {path}: not found")


class UnreadableVersionFile(WinrtPackError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to read version file {path}: {reason}")


class PackFailed(WinrtPackError):
    def __init__(self, nuspec: Path, reason: str | None = None) -> None:
        self.nuspec = nuspec
        msg = f"nuget pack failed for {nuspec}!"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
