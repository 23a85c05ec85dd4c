"""Path and tool layout. All paths relative to the working directory.

Defaults match the conventional layout (nuget/*.nuspec + nuget/VERSION, cargo and
nuget on PATH). A project can override them with winrt-pack.yaml, e.g.::

    nuget_dir: packaging/nuget
    nuget: C:/tools/nuget.exe
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from winrt_pack.errors import ConfigError

log = logging.getLogger(__name__)

CONFIG_FILE = "winrt-pack.yaml"

DEFAULT_LAYOUT: dict[str, str] = {
    "nuget_dir": "nuget",
    "version_file": "VERSION",
    "descriptor_extension": "nuspec",
    "cargo": "cargo",
    "nuget": "nuget",
}


def resolve_layout(layout: dict[str, Any] | None) -> dict[str, str]:
    """Return layout dict with defaults filled. Unknown keys are ignored."""
    if layout is None:
        return dict(DEFAULT_LAYOUT)
    out = dict(DEFAULT_LAYOUT)
    out.update({k: str(v) for k, v in layout.items() if k in out})
    out["descriptor_extension"] = out["descriptor_extension"].lstrip(".")
    return out


def load_layout(root: Path) -> dict[str, str]:
    """Read root/winrt-pack.yaml if present and merge it over the defaults."""
    path = root / CONFIG_FILE
    if not path.is_file():
        return resolve_layout(None)
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(path, str(e)) from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(path, "expected a mapping at top level")
    unknown = sorted(k for k in data if k not in DEFAULT_LAYOUT)
    if unknown:
        log.warning("Ignoring unknown keys in %s: %s", path, ", ".join(map(str, unknown)))
    for key in DEFAULT_LAYOUT:
        if key in data and not isinstance(data[key], str):
            raise ConfigError(path, f"{key} must be a string, got {data[key]!r}")
    layout = resolve_layout(data)
    log.debug("Loaded layout from %s: %s", path, layout)
    return layout
