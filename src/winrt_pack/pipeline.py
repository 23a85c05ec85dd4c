"""Whole-run driver: [chdir] -> [build each target] -> [resolve nuget inputs -> pack].

Steps raise WinrtPackError subclasses; run() is the only place they are caught.
A failure stops everything after it and nothing already done is rolled back.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

from winrt_pack.build import build_targets
from winrt_pack.errors import WinrtPackError
from winrt_pack.layout import load_layout, resolve_layout
from winrt_pack.nuget import pack, resolve_descriptor
from winrt_pack.plan import Intent, derive_plan
from winrt_pack.workdir import enter_directory

log = logging.getLogger(__name__)


def execute(intent: Intent, layout: dict[str, Any] | None = None) -> None:
    """Run every step the intent implies. Raises WinrtPackError on the first failure."""
    if intent.dir is not None:
        enter_directory(intent.dir)

    cfg = resolve_layout(layout) if layout is not None else load_layout(Path.cwd())
    plan = derive_plan(intent)
    log.debug("Plan: %s", plan)

    if plan.should_build:
        build_targets(plan.targets, cargo=cfg["cargo"])

    if plan.should_pack:
        descriptor = resolve_descriptor(
            Path(cfg["nuget_dir"]),
            ext=cfg["descriptor_extension"],
            version_file=cfg["version_file"],
        )
        pack(descriptor, nuget=cfg["nuget"])


def run(intent: Intent, layout: dict[str, Any] | None = None) -> int:
    """Execute intent. Returns 0 when every requested step succeeded, else prints why and returns 1."""
    try:
        execute(intent, layout)
    except WinrtPackError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    return 0
