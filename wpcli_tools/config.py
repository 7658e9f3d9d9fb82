"""Runtime settings read from ``WPCLI_TOOLS_*`` environment variables."""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

LOGGER = logging.getLogger("wpcli_tools.config")

ENV_PREFIX = "WPCLI_TOOLS_"
DEFAULT_HTTP_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "wpcli-tools/1.0"
DEFAULT_BACKEND_ORDER: Tuple[str, ...] = ("pillow", "header", "exif")


@dataclass(frozen=True)
class Settings:
    """
    Defaults used by components that are not given explicit arguments.

    Attributes:
        temp_root: Base directory under which the scratch directory lives
        http_timeout: Seconds to wait for URI reachability checks
        user_agent: User-Agent header sent with reachability checks
        image_backends: Names of image-size backends, in fallback order
        log_level: Level passed to :func:`wpcli_tools.utils.configure_logging`
    """

    temp_root: Path = field(default_factory=lambda: Path(tempfile.gettempdir()))
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    image_backends: Tuple[str, ...] = DEFAULT_BACKEND_ORDER
    log_level: str = "WARNING"


def _read(env: Mapping[str, str], name: str) -> Optional[str]:
    value = env.get(ENV_PREFIX + name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _parse_timeout(raw: Optional[str]) -> float:
    if raw is None:
        return DEFAULT_HTTP_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        LOGGER.warning("Ignoring invalid %sHTTP_TIMEOUT=%r", ENV_PREFIX, raw)
        return DEFAULT_HTTP_TIMEOUT
    if timeout <= 0:
        LOGGER.warning("Ignoring non-positive %sHTTP_TIMEOUT=%r", ENV_PREFIX, raw)
        return DEFAULT_HTTP_TIMEOUT
    return timeout


def _parse_backends(raw: Optional[str]) -> Tuple[str, ...]:
    if raw is None:
        return DEFAULT_BACKEND_ORDER
    names = tuple(token.strip().lower() for token in raw.split(",") if token.strip())
    unknown = [name for name in names if name not in DEFAULT_BACKEND_ORDER]
    if not names or unknown:
        LOGGER.warning("Ignoring invalid %sIMAGE_BACKENDS=%r", ENV_PREFIX, raw)
        return DEFAULT_BACKEND_ORDER
    return names


def _parse_log_level(raw: Optional[str]) -> str:
    if raw is None:
        return "WARNING"
    level = raw.upper()
    if not isinstance(logging.getLevelName(level), int):
        LOGGER.warning("Ignoring unknown %sLOG_LEVEL=%r", ENV_PREFIX, raw)
        return "WARNING"
    return level


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from ``env`` (defaults to :data:`os.environ`)."""

    source = os.environ if env is None else env
    temp_root = _read(source, "TEMP_ROOT")
    return Settings(
        temp_root=Path(temp_root).expanduser() if temp_root else Path(tempfile.gettempdir()),
        http_timeout=_parse_timeout(_read(source, "HTTP_TIMEOUT")),
        user_agent=_read(source, "USER_AGENT") or DEFAULT_USER_AGENT,
        image_backends=_parse_backends(_read(source, "IMAGE_BACKENDS")),
        log_level=_parse_log_level(_read(source, "LOG_LEVEL")),
    )


__all__ = ["Settings", "load_settings", "DEFAULT_BACKEND_ORDER"]
