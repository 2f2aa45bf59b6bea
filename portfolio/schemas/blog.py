import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CATEGORY = "misc"


class FrontMatter(BaseModel):
    """YAML metadata block as authored at the top of a post."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    title: str
    date: Optional[str] = None
    excerpt: Optional[str] = None
    categories: Optional[Union[List[str], str]] = None
    category: Optional[str] = None  # legacy single-category schema
    read_time: Optional[str] = None
    slug: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def _date_to_text(cls, value):
        if value is not None and not isinstance(value, str):
            # left for parse_date to reject
            return str(value)
        return value


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    date: datetime.date
    excerpt: str = ""
    categories: List[str] = Field(default_factory=list)
    read_time: str
    slug: str
    html: str

    @property
    def category(self) -> str:
        return self.categories[0] if self.categories else DEFAULT_CATEGORY
