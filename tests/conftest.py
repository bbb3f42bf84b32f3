from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from explainthis.config.resolution import ResolutionSettings

if TYPE_CHECKING:
    from pathlib import Path

ENV_VARS = (
    "EXPLAINTHIS_LANGUAGE",
    "EXPLAINTHIS_USER_AGENT",
    "EXPLAINTHIS_TIMEOUT_SECONDS",
    "EXPLAINTHIS_SEARCH_LIMIT",
    "EXPLAINTHIS_TIE_MARGIN",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("EXPLAINTHIS_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("EXPLAINTHIS_HTTP_CACHE", "off")


@pytest.fixture
def fast_settings() -> ResolutionSettings:
    return ResolutionSettings(timeout_seconds=0.2)
