from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SearchInput(BaseModel):
    query: str = Field(description="The search query to execute.")


class MetaTag(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    og_description: str | None = Field(default=None, alias="og:description")


class PageMap(BaseModel):
    model_config = ConfigDict(extra="ignore")

    metatags: list[MetaTag] | None = None


class SearchResultItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    link: str = ""
    snippet: str = ""
    pagemap: PageMap | None = None

    @property
    def open_graph_description(self) -> str | None:
        """``og:description`` of the first metatag block, if the page supplied one."""
        if self.pagemap is None or not self.pagemap.metatags:
            return None
        return self.pagemap.metatags[0].og_description or None


class SearchResponse(BaseModel):
    """The subset of a Custom Search JSON API response the tool reads."""

    model_config = ConfigDict(extra="ignore")

    items: list[SearchResultItem] | None = None

    @property
    def first_item(self) -> SearchResultItem | None:
        return self.items[0] if self.items else None
