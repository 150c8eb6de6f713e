"""
Monta os controladores da página e expõe snapshots somente-leitura para renderização.

Cada controlador é o único dono da sua fatia de estado; o snapshot apenas lê.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from portfolio.storage.preferences import PreferenceStore
from portfolio.ui.carousel import CarouselController
from portfolio.ui.client import ArticlesClient
from portfolio.ui.feed_state import FeedStateController, FetchArticlesFn, FetchStatus
from portfolio.ui.input_router import InputRouter
from portfolio.ui.projects import PROJECTS, Project
from portfolio.ui.theme import ThemeController
from portfolio.utils.tz_utils import rfc822_to_local_str


@dataclass(frozen=True)
class ArticleCard:
    title: str
    link: str
    author: str
    published: str  # data formatada, ou a string original se não for parseável
    summary: str


@dataclass(frozen=True)
class PageSnapshot:
    theme: str
    theme_transitioning: bool
    project: Optional[Project]
    project_index: int
    status: FetchStatus
    error: Optional[str]
    articles: Tuple[ArticleCard, ...]
    article_index: int

    @property
    def articles_empty(self) -> bool:
        return self.status is FetchStatus.success and not self.articles

    @property
    def current_article(self) -> Optional[ArticleCard]:
        if not self.articles:
            return None
        return self.articles[self.article_index]


class PortfolioPage:
    def __init__(
        self,
        fetch_articles: Optional[FetchArticlesFn] = None,
        store: Optional[PreferenceStore] = None,
        scheduler=None,
        projects: Tuple[Project, ...] = PROJECTS,
    ):
        self.projects = projects
        self.project_carousel = CarouselController(len(projects), name="projects")
        self.article_carousel = CarouselController(0, name="articles")
        self.feed = FeedStateController(
            fetch_articles or ArticlesClient().fetch_articles,
            self.article_carousel,
        )
        self.router = InputRouter(self.project_carousel, self.article_carousel)
        self.theme = ThemeController(store or PreferenceStore(), scheduler=scheduler)

    def snapshot(self) -> PageSnapshot:
        lifecycle = self.feed.lifecycle
        cards = tuple(
            ArticleCard(
                title=a.title,
                link=a.link,
                author=a.author,
                published=rfc822_to_local_str(a.published_at) or a.published_at,
                summary=a.summary or "",
            )
            for a in lifecycle.articles
        )
        project = self.projects[self.project_carousel.index] if self.projects else None
        return PageSnapshot(
            theme=self.theme.theme.value,
            theme_transitioning=self.theme.transitioning,
            project=project,
            project_index=self.project_carousel.index,
            status=lifecycle.status,
            error=lifecycle.error,
            articles=cards,
            article_index=self.article_carousel.index % len(cards) if cards else 0,
        )

    def close(self):
        self.feed.shutdown()
        self.theme.shutdown()
