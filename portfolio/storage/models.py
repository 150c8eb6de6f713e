from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_AUTHOR = "Unknown"

class ArticleRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str
    link: str
    published_at: str = Field(alias="pubDate")  # string da fonte, sem reparse
    author: str = DEFAULT_AUTHOR
    summary: Optional[str] = Field(default=None, alias="description")

    @field_validator("title", "link", "published_at")
    @classmethod
    def _required_text(cls, value: str) -> str:
        value = (value or "").strip()
        if not value:
            raise ValueError("must be non-empty after trimming")
        return value

    @field_validator("author", mode="before")
    @classmethod
    def _author_or_unknown(cls, value: Optional[str]) -> str:
        return (value or "").strip() or DEFAULT_AUTHOR

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
