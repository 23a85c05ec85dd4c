"""Windows platforms winrt-pack can build, and their cargo target triples."""

from __future__ import annotations

from enum import Enum

from winrt_pack.errors import UnrecognizedPlatform


class Platform(Enum):
    """Closed set of build platforms. Member order is the canonical build order."""

    X64 = "x64"
    ARM64 = "ARM64"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def rust_target(self) -> str:
        return RUST_TARGETS[self]

    def __str__(self) -> str:
        return self.value


RUST_TARGETS: dict[Platform, str] = {
    Platform.X64: "x86_64-pc-windows-msvc",
    Platform.ARM64: "aarch64-pc-windows-msvc",
}

# A platform added without a target triple must fail at import, not at build time.
_missing = [p.name for p in Platform if p not in RUST_TARGETS]
if _missing:
    raise RuntimeError(f"No rust target for platform(s): {', '.join(_missing)}")
if len(set(RUST_TARGETS.values())) != len(RUST_TARGETS):
    raise RuntimeError("Two platforms share a rust target")

ALL_PLATFORMS: tuple[Platform, ...] = tuple(Platform)


def accepted_names() -> list[str]:
    """Display names accepted by parse_platform, in canonical order."""
    return [p.display_name for p in ALL_PLATFORMS]


def parse_platform(token: str) -> Platform:
    """Case-insensitive lookup (x64, X64, arm64, ARM64, ...). Raises UnrecognizedPlatform."""
    wanted = token.lower()
    for platform in ALL_PLATFORMS:
        if platform.display_name.lower() == wanted:
            return platform
    raise UnrecognizedPlatform(token, accepted_names())
