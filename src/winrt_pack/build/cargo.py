"""Run `cargo build --release --target <triple>` for each requested target, in order.

Builds are sequential and stop at the first failure; artifacts from targets that
already succeeded are left in place.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Iterable

from winrt_pack.errors import BuildFailed

log = logging.getLogger(__name__)


def build_command(target: str, cargo: str = "cargo") -> list[str]:
    return [cargo, "build", "--release", "--target", target]


def build_target(target: str, cargo: str = "cargo") -> None:
    """Build one target. Raises BuildFailed on non-zero exit or if cargo cannot be started."""
    cmd = build_command(target, cargo)
    log.debug("Running %s", cmd)
    try:
        r = subprocess.run(cmd)
    except (OSError, ValueError) as e:
        raise BuildFailed(target, f"could not run {cargo}: {e}") from e
    if r.returncode != 0:
        raise BuildFailed(target, f"exit code {r.returncode}")


def build_targets(targets: Iterable[str], cargo: str = "cargo") -> None:
    print("Building...")
    for target in targets:
        print(f"  {target}...")
        build_target(target, cargo)
