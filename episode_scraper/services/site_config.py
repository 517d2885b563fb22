from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from ..errors import ConfigurationError

CONFIGS_DIR = Path(__file__).resolve().parent / "scrapers" / "configs"

_REQUIRED_KEYS = {"site_name", "search_path", "selectors"}
_REQUIRED_SELECTORS = {
    "search_result",
    "season_option",
    "episode_row",
    "episode_rank",
    "episode_title",
}

# Cache for site configurations to avoid repeated disk reads.
_config_cache: dict[Path, dict[str, Any]] = {}


def load_site_config(config_path: Path) -> dict[str, Any]:
    """Load and minimally validate a YAML site configuration.

    Configuration files are cached in-memory after the first load, so repeated
    client construction does not hit the disk again.
    """

    resolved_path = config_path.resolve()
    cached = _config_cache.get(resolved_path)
    if cached is not None:
        return cached

    if not resolved_path.exists():
        raise FileNotFoundError(f"Scraper config not found: {resolved_path}")

    with resolved_path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"Scraper config must be a mapping: {resolved_path}")

    missing = _REQUIRED_KEYS - data.keys()
    if missing:
        raise ConfigurationError(f"Config missing keys: {', '.join(sorted(missing))}")

    selectors = data.get("selectors")
    if not isinstance(selectors, dict):
        raise ConfigurationError("'selectors' must be a mapping of CSS selectors")
    missing_selectors = _REQUIRED_SELECTORS - selectors.keys()
    if missing_selectors:
        raise ConfigurationError(
            f"Config missing selectors: {', '.join(sorted(missing_selectors))}"
        )

    _config_cache[resolved_path] = data
    return data


def load_bundled_site_config(name: str) -> dict[str, Any]:
    """Load one of the configurations shipped in ``scrapers/configs``."""
    return load_site_config(CONFIGS_DIR / f"{name}.yaml")
