"""
Runtime configuration read from environment variables (and an optional .env file).
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

META_BASE_URL = 'https://piston-meta.mojang.com'
LAUNCHER_BASE_URL = 'https://launchercontent.mojang.com'

# Only the newest entries of the patch notes index make it into the feed
MAX_ENTRIES = 5


@dataclass(frozen=True)
class Settings:
    """Upstream hosts and HTTP behaviour for one invocation."""
    meta_base_url: str = META_BASE_URL
    launcher_base_url: str = LAUNCHER_BASE_URL
    http_timeout: float = 30.0
    fallback_host: str = 'localhost'
    log_level: str = 'INFO'


def load_settings() -> Settings:
    """Build Settings from PATCHNOTES_* environment variables."""
    timeout = os.getenv('PATCHNOTES_HTTP_TIMEOUT', '30')
    try:
        http_timeout = float(timeout)
    except ValueError:
        raise ValueError(f"PATCHNOTES_HTTP_TIMEOUT must be a number, got {timeout!r}")

    return Settings(
        meta_base_url=os.getenv('PATCHNOTES_META_BASE_URL', META_BASE_URL).rstrip('/'),
        launcher_base_url=os.getenv('PATCHNOTES_LAUNCHER_BASE_URL', LAUNCHER_BASE_URL).rstrip('/'),
        http_timeout=http_timeout,
        fallback_host=os.getenv('PATCHNOTES_FALLBACK_HOST', 'localhost'),
        log_level=os.getenv('PATCHNOTES_LOG_LEVEL', 'INFO').upper(),
    )
