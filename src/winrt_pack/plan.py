"""Turn the user's intent (flags) into the concrete set of actions to run."""

from __future__ import annotations

from dataclasses import dataclass

from winrt_pack.platforms import ALL_PLATFORMS, Platform


@dataclass(frozen=True)
class Intent:
    """What was asked for on the command line. `build` keeps order and duplicates."""

    dir: str | None = None
    all: bool = False
    build: tuple[Platform, ...] = ()
    pack: bool = False


@dataclass(frozen=True)
class ActionPlan:
    should_build: bool
    targets: tuple[str, ...]
    should_pack: bool


def derive_plan(intent: Intent) -> ActionPlan:
    """Derive build targets and pack decision from intent. Pure; never fails.

    --all overrides the explicit platform list (no union): every known platform is
    built once, in canonical order. Without --all the explicit list is built as given.
    """
    platforms = ALL_PLATFORMS if intent.all else intent.build
    return ActionPlan(
        should_build=intent.all or bool(intent.build),
        targets=tuple(p.rust_target for p in platforms),
        should_pack=intent.all or intent.pack,
    )
