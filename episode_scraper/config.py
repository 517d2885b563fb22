# episode_scraper/config.py

import configparser
import logging
import os
from dataclasses import dataclass

# --- Constants ---
DEFAULT_HOST = "www.tv.com"
DEFAULT_SCHEME = "http"
DEFAULT_TIMEOUT_SECONDS = 30
# max. 12 season fetches at once so we don't open too many connections
MAX_SEASON_WORKERS = 12
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/115.0 Safari/537.36"
)

# Setup basic logging
logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)
logging.getLogger("httpx").setLevel(logging.WARNING)


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings handed to the clients at construction time."""

    host: str = DEFAULT_HOST
    scheme: str = DEFAULT_SCHEME
    timeout: int = DEFAULT_TIMEOUT_SECONDS
    max_workers: int = MAX_SEASON_WORKERS
    user_agent: str = DEFAULT_USER_AGENT


def get_client_config(config_path: str = "config.ini") -> ClientConfig:
    """
    Reads the optional [scraper] section from config.ini.

    A missing file or section is not an error; the defaults are used instead.
    Invalid numeric values raise ValueError so a broken config is noticed early.
    """
    if not os.path.exists(config_path):
        logger.info(
            f"[CONFIG] '{config_path}' not found. Using default scraper settings."
        )
        return ClientConfig()

    parser = configparser.ConfigParser()
    with open(config_path, encoding="utf-8") as f:
        parser.read_string(f.read())

    if not parser.has_section("scraper"):
        logger.info("[CONFIG] No [scraper] section found. Using default settings.")
        return ClientConfig()

    host = parser.get("scraper", "host", fallback=DEFAULT_HOST).strip()
    scheme = parser.get("scraper", "scheme", fallback=DEFAULT_SCHEME).strip()
    user_agent = parser.get(
        "scraper", "user_agent", fallback=DEFAULT_USER_AGENT
    ).strip()
    timeout = _read_positive_int(parser, "timeout", DEFAULT_TIMEOUT_SECONDS)
    max_workers = _read_positive_int(parser, "max_workers", MAX_SEASON_WORKERS)

    if not host:
        raise ValueError("'host' in the [scraper] section must not be empty.")

    config = ClientConfig(
        host=host,
        scheme=scheme or DEFAULT_SCHEME,
        timeout=timeout,
        max_workers=max_workers,
        user_agent=user_agent or DEFAULT_USER_AGENT,
    )
    logger.info(
        f"[CONFIG] Scraper configuration loaded: host={config.host}, "
        f"max_workers={config.max_workers}, timeout={config.timeout}s"
    )
    return config


def _read_positive_int(
    parser: configparser.ConfigParser, option: str, default: int
) -> int:
    """Reads an integer option from [scraper] that must be greater than zero."""
    raw = parser.get("scraper", option, fallback=None)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"'{option}' must be an integer, got '{raw.strip()}'")
    if value <= 0:
        raise ValueError(f"'{option}' must be greater than zero, got {value}")
    return value
