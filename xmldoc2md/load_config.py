"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from xmldoc2md.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "output": {
        "structure": "flat",
        "index_page": "index",
        "github_pages": False,
        "gitlab_wiki": False,
    },
    "page": {
        "back_button": False,
        "examples_directory": None,
        "language": "csharp",
    },
    "members": {
        "accessibility": "protected",
    },
}

STRUCTURES = ("flat", "tree")


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    structure = config["output"].get("structure")
    if structure not in STRUCTURES:
        msg = f"Unknown output structure {structure!r}; expected one of {STRUCTURES}"
        raise ValueError(msg)
    return config
