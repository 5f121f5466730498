"""Presentation settings: built-in defaults, YAML overrides, CLI overrides."""

from pathlib import Path

import yaml

from ..gui import geometry

PROJECT_DIR = Path(__file__).resolve().parents[1]

# Board size and win length are fixed in Board.py and deliberately absent here
DEFAULT_SETTINGS = {
    "cell_size": geometry.CELL_SIZE,
    "margin": geometry.MARGIN,
    "stone_radius": geometry.STONE_RADIUS,
    "language": "en",
    "fps": 30,
    "font_path": None,
}


def resolve_project_path(path):
    """Resolve a package-relative path when invoked from outside `Gobang_Game/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path="config/settings.yaml"):
    """Load settings from YAML on top of DEFAULT_SETTINGS; defaults only if the file is missing."""
    settings = dict(DEFAULT_SETTINGS)
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return settings

    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    unknown = set(data) - set(DEFAULT_SETTINGS)
    if unknown:
        raise ValueError(f"Unknown settings in {path}: {', '.join(sorted(unknown))}")
    settings.update(data)
    return settings


def apply_cli_overrides(settings, args):
    """Return a copy of settings with any CLI options that were given."""
    merged = dict(settings)
    if args.language is not None:
        merged["language"] = args.language
    if args.cell_size is not None:
        merged["cell_size"] = args.cell_size
    if args.margin is not None:
        merged["margin"] = args.margin
    return merged
