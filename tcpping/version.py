import asyncio
import logging
import platform
import sys
from typing import Optional

import aiohttp
from packaging.version import InvalidVersion, Version

from .config import PROGRAM_NAME, RELEASES_URL, __version__

logger = logging.getLogger(__name__)

def version_line() -> str:
    return f"{PROGRAM_NAME} version {__version__} ({sys.platform}/{platform.machine()})"

async def fetch_latest_release(url: str = RELEASES_URL, timeout: float = 5.0) -> Optional[tuple[str, bool]]:
    """
    Latest published release as (version, is_prerelease).

    Returns None when the releases API cannot be reached or answers with
    something unexpected; the version check is best effort.
    """
    try:
        async with aiohttp.ClientSession() as session:
            async with session.get(url, timeout=aiohttp.ClientTimeout(total=timeout)) as response:
                response.raise_for_status()
                releases = await response.json(content_type=None)
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        logger.debug("release check failed: %r", e)
        return None

    if not isinstance(releases, list) or not releases:
        return None
    latest = releases[0]
    if not isinstance(latest, dict) or not isinstance(latest.get("tag_name"), str):
        return None
    return latest["tag_name"].lstrip("v"), bool(latest.get("prerelease", False))

def upgrade_available(current: str, latest: str, latest_is_prerelease: bool) -> bool:
    # a pre-release build is always offered the next stable release
    try:
        current_v, latest_v = Version(current), Version(latest)
    except InvalidVersion:
        logger.debug("cannot compare versions %r and %r", current, latest)
        return False
    return latest_v > current_v or (current_v.is_prerelease and not latest_is_prerelease)

async def check_for_update(current: str = __version__, url: str = RELEASES_URL) -> Optional[str]:
    """Upgrade hint line, or None when up to date or the check failed."""
    release = await fetch_latest_release(url)
    if release is None:
        return None
    latest, is_prerelease = release
    if not upgrade_available(current, latest, is_prerelease):
        return None
    return f"New version available: v{latest}. run 'pip install --upgrade {PROGRAM_NAME}' to update"
