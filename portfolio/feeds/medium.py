import logging
import os
from typing import List, Optional

import requests

from .base import BaseFeed, UpstreamError
from .parser import parse_feed, MAX_ARTICLES
from portfolio.storage.models import ArticleRecord

logger = logging.getLogger(__name__)

DEFAULT_FEED_URL = "https://medium.com/feed/@{username}"
# O Medium rejeita clientes sem um User-Agent de navegador
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


def _env_timeout() -> Optional[float]:
    raw = os.getenv("FEED_TIMEOUT")
    if not raw:
        return None  # sem timeout explícito: padrão do transporte
    return float(raw)


# ---------- sessão HTTP global com pool (sem retry: toda recuperação é manual) ----------
_SESSION = requests.Session()


def normalize_handle(username: Optional[str]) -> str:
    """Remove espaços e um único '@' inicial. Retorna '' se não sobrar nada."""
    handle = (username or "").strip()
    if handle.startswith("@"):
        handle = handle[1:]
    return handle.strip()


class MediumFeed(BaseFeed):
    def __init__(
        self,
        username: str,
        max_items: int = MAX_ARTICLES,
        url_template: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        # handle já normalizado pelo chamador (ver normalize_handle)
        self.username: str = username
        self.max_items: int = max_items
        self.url_template: str = url_template or os.getenv("MEDIUM_FEED_URL") or DEFAULT_FEED_URL
        self.timeout = timeout if timeout is not None else _env_timeout()
        self.user_agent: str = os.getenv("FEED_USER_AGENT") or DEFAULT_USER_AGENT
        self.session = session or _SESSION

    @property
    def url(self) -> str:
        return self.url_template.format(username=self.username)

    def fetch(self) -> str:
        """Uma única requisição GET ao feed. Levanta UpstreamError em qualquer falha."""
        try:
            response = self.session.get(
                self.url,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise UpstreamError(f"Network error fetching {self.url}: {e}") from e

        if not response.ok:
            raise UpstreamError(
                f"Failed to fetch RSS feed {self.url}: {response.status_code}",
                status_code=response.status_code,
            )
        return response.text

    def fetch_articles(self) -> List[ArticleRecord]:
        articles = parse_feed(self.fetch(), limit=self.max_items)
        logger.info("Medium '%s': %d artigos", self.username, len(articles))
        return articles
