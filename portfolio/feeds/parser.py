"""
Parser de feeds RSS (Medium) para uma lista normalizada de ArticleRecord.

Usa árvore de elementos (BeautifulSoup + lxml-xml) em vez de regex. CDATA é
decodificado pela própria árvore, então o bloco escapado sempre prevalece
sobre o texto literal. Para autor, `dc:creator` prevalece sobre `author`.
"""
import logging
from typing import List, Optional

from bs4 import BeautifulSoup
from pydantic import ValidationError

from portfolio.storage.models import ArticleRecord

logger = logging.getLogger(__name__)

MAX_ARTICLES = 12

# ordem de prioridade por campo
_AUTHOR_TAGS = ("dc:creator", "author")


def _text_of(item, name: str) -> str:
    tag = item.find(name, recursive=False)
    if tag is None:
        return ""
    return tag.get_text().strip()


def _first_present(item, names) -> str:
    # o primeiro campo presente vence, mesmo vazio (vazio vira "Unknown")
    for name in names:
        tag = item.find(name, recursive=False)
        if tag is not None:
            return tag.get_text().strip()
    return ""


def _build_record(item) -> Optional[ArticleRecord]:
    title = _text_of(item, "title")
    link = _text_of(item, "link")
    pub_date = _text_of(item, "pubDate")
    if not (title and link and pub_date):
        return None
    try:
        return ArticleRecord(
            title=title,
            link=link,
            published_at=pub_date,
            author=_first_present(item, _AUTHOR_TAGS),
            summary=_text_of(item, "description"),
        )
    except ValidationError as e:
        logger.debug("Descartando item inválido '%s': %s", title, e)
        return None


def parse_feed(xml_text: str, limit: int = MAX_ARTICLES) -> List[ArticleRecord]:
    """Retorna até `limit` artigos válidos, na ordem do documento. Nunca levanta."""
    if not xml_text or not xml_text.strip():
        return []

    soup = BeautifulSoup(xml_text, "xml")
    articles: List[ArticleRecord] = []
    for item in soup.find_all("item"):
        record = _build_record(item)
        if record is None:
            continue
        articles.append(record)
        if len(articles) >= limit:
            break
    return articles
