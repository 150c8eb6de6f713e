from abc import ABC, abstractmethod
from typing import List

from portfolio.storage.models import ArticleRecord

# mensagens públicas (contrato de erro do endpoint e da página)
USERNAME_REQUIRED = "Username is required"
FETCH_FAILED = "Failed to fetch articles. Please check the username and try again."


class UpstreamError(Exception):
    """Falha ao buscar o feed de origem (status não-2xx ou erro de rede)."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class BaseFeed(ABC):
    @abstractmethod
    def fetch(self) -> str:
        pass

    @abstractmethod
    def fetch_articles(self) -> List[ArticleRecord]:
        pass
