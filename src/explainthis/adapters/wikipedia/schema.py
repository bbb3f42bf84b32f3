"""MediaWiki action API response schemas for search and extracts."""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

log = logging.getLogger(__name__)

_OPENSEARCH_FIELDS = ("query", "titles", "descriptions", "urls")


class WikipediaBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.debug(
            "Wikipedia %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class OpenSearchResponse(WikipediaBaseModel):
    """``action=opensearch`` answer: ``[query, titles, descriptions, urls]``."""

    query: str
    titles: list[str]
    descriptions: list[str] = Field(default_factory=list)
    urls: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _from_array(cls, data: object) -> object:
        if isinstance(data, list):
            return dict(zip(_OPENSEARCH_FIELDS, data, strict=False))
        return data


class TitleMapping(WikipediaBaseModel):
    from_title: str = Field(alias="from")
    to_title: str = Field(alias="to")


class ExtractPage(WikipediaBaseModel):
    title: str
    pageid: int | None = None
    ns: int | None = None
    extract: str | None = None
    missing: str | bool | None = None


class ExtractQuery(WikipediaBaseModel):
    pages: dict[str, ExtractPage] = Field(default_factory=dict)
    normalized: list[TitleMapping] = Field(default_factory=list)
    redirects: list[TitleMapping] = Field(default_factory=list)


class ExtractResponse(WikipediaBaseModel):
    batchcomplete: str | bool | None = None
    query: ExtractQuery | None = None
    warnings: dict[str, object] | None = None

    @property
    def first_extract(self) -> str | None:
        if self.query is None or not self.query.pages:
            return None
        return next(iter(self.query.pages.values())).extract


class APIErrorDetail(BaseModel):
    code: str
    info: str = ""


class APIErrorResponse(BaseModel):
    error: APIErrorDetail
