"""Wiktionary REST ``page/definition`` response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, RootModel


class WiktionaryBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class WiktionarySense(WiktionaryBaseModel):
    definition: str = ""
    examples: list[str] = Field(default_factory=list)


class WiktionaryUsage(WiktionaryBaseModel):
    part_of_speech: str | None = Field(default=None, alias="partOfSpeech")
    language: str | None = None
    definitions: list[WiktionarySense] = Field(default_factory=list)


class DefinitionResponse(RootModel[dict[str, list[WiktionaryUsage]]]):
    """Usages keyed by language code, e.g. ``{"en": [...], "fr": [...]}``."""

    def usages(self, language: str) -> list[WiktionaryUsage]:
        return self.root.get(language, [])
