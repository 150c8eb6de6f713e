"""
Ciclo de vida da busca de artigos (idle -> loading -> success/error).

O controlador é o único que altera o estado; a renderização só lê `lifecycle`.
Várias buscas podem estar em andamento ao mesmo tempo: a que resolver por
último sobrescreve o estado (sem cancelamento nem token de sequência).
"""
import logging
import os
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from threading import Lock
from typing import Callable, List, Optional, Tuple

from portfolio.feeds.base import FETCH_FAILED, USERNAME_REQUIRED, UpstreamError
from portfolio.storage.models import ArticleRecord
from portfolio.ui.carousel import CarouselController
from portfolio.ui.client import ArticlesRequestError

logger = logging.getLogger(__name__)

DEFAULT_HANDLE = os.getenv("DEFAULT_MEDIUM_HANDLE", "Medium")
_MAX_FETCH_WORKERS = 4

FetchArticlesFn = Callable[[str], List[ArticleRecord]]


class FetchStatus(str, Enum):
    idle = "idle"
    loading = "loading"
    success = "success"
    error = "error"


@dataclass(frozen=True)
class FetchLifecycle:
    status: FetchStatus = FetchStatus.idle
    articles: Tuple[ArticleRecord, ...] = field(default_factory=tuple)
    error: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        # lista vazia com sucesso não é erro: estado "sem artigos"
        return self.status is FetchStatus.success and not self.articles


class FeedStateController:
    def __init__(
        self,
        fetch_articles: FetchArticlesFn,
        article_carousel: CarouselController,
        default_handle: str = DEFAULT_HANDLE,
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        self._fetch_articles = fetch_articles
        self.article_carousel = article_carousel
        self.default_handle = default_handle
        self._executor = executor
        self._lock = Lock()
        self._lifecycle = FetchLifecycle()

    @property
    def lifecycle(self) -> FetchLifecycle:
        return self._lifecycle

    @property
    def articles(self) -> Tuple[ArticleRecord, ...]:
        return self._lifecycle.articles

    # ---------- transições ----------
    def _begin(self):
        with self._lock:
            self._lifecycle = FetchLifecycle(FetchStatus.loading, self._lifecycle.articles)

    def _succeed(self, articles: List[ArticleRecord]):
        with self._lock:
            self.article_carousel.set_item_count(len(articles))
            self._lifecycle = FetchLifecycle(FetchStatus.success, tuple(articles))

    def _fail(self, message: str):
        with self._lock:
            self.article_carousel.set_item_count(0)
            self._lifecycle = FetchLifecycle(FetchStatus.error, (), message)

    def _run(self, handle: str):
        try:
            articles = self._fetch_articles(handle)
        except ArticlesRequestError as e:
            self._fail(e.message)
            return
        except UpstreamError as e:
            logger.error("Feed fetch failed for '%s': %s", handle, e)
            self._fail(FETCH_FAILED)
            return
        except Exception:
            logger.exception("Unexpected error loading articles for '%s'", handle)
            self._fail(FETCH_FAILED)
            return
        self._succeed(articles)

    def _accept(self, handle: Optional[str]) -> bool:
        if not (handle or "").strip():
            # mesmo contrato do endpoint, sem chamada de rede
            self._fail(USERNAME_REQUIRED)
            return False
        self._begin()
        return True

    # ---------- gatilhos ----------
    def load(self, handle: str) -> FetchLifecycle:
        """Busca síncrona: útil para testes e CLI."""
        if self._accept(handle):
            self._run(handle.strip())
        return self._lifecycle

    def submit(self, handle: str) -> Optional[Future]:
        """Entra em loading imediatamente e resolve em background."""
        if not self._accept(handle):
            return None
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=_MAX_FETCH_WORKERS)
        return self._executor.submit(self._run, handle.strip())

    def mount(self) -> Optional[Future]:
        return self.submit(self.default_handle)

    def shutdown(self):
        if self._executor is not None:
            self._executor.shutdown(wait=True)
