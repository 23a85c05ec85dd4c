"""Release builds of the component, one cargo invocation per target triple."""

from .cargo import build_command, build_target, build_targets

__all__ = [
    "build_command",
    "build_target",
    "build_targets",
]
