import logging
import os
from typing import List, Optional

import requests

from portfolio.feeds.base import FETCH_FAILED
from portfolio.storage.models import ArticleRecord

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8000"


class ArticlesRequestError(Exception):
    """Resposta de erro do endpoint de artigos; `message` é o texto exibível."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ArticlesClient:
    """Cliente do endpoint /api/medium, usado pela página."""

    def __init__(self, base_url: Optional[str] = None, session: Optional[requests.Session] = None):
        self.base_url = (base_url or os.getenv("ARTICLES_API_URL", DEFAULT_API_URL)).rstrip("/")
        self.session = session or requests.Session()

    def fetch_articles(self, username: str) -> List[ArticleRecord]:
        try:
            response = self.session.get(f"{self.base_url}/api/medium", params={"username": username})
        except requests.RequestException as e:
            logger.error("Articles API unreachable: %s", e)
            raise ArticlesRequestError(FETCH_FAILED) from e

        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if not response.ok:
            message = payload.get("error") if isinstance(payload, dict) else None
            raise ArticlesRequestError(message or FETCH_FAILED, status_code=response.status_code)

        return [ArticleRecord(**a) for a in payload.get("articles", [])]
