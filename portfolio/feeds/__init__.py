from .medium import MediumFeed, normalize_handle
from .parser import parse_feed, MAX_ARTICLES

from .base import BaseFeed, UpstreamError, USERNAME_REQUIRED, FETCH_FAILED

__all__ = ["USERNAME_REQUIRED", "FETCH_FAILED", "MediumFeed", "normalize_handle", "parse_feed", "MAX_ARTICLES", "BaseFeed", "UpstreamError"]
