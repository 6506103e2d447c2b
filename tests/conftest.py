from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI

from vanity.app.domain.errors import RenderError
from vanity.app.domain.models import MetadataRecord, MetadataTable
from vanity.app.infrastructure.persistence.json_file.json_metadata_loader import parse_metadata
from vanity.app.infrastructure.templating.jinja_page_renderer import JinjaPageRenderer
from vanity.app.routers.go_import import go_import_router
from vanity.app.routers.health import health_router
from vanity.app.routers.utils import install_error_handlers
from vanity.app.services.metadata_store import MetadataStore
from tests.test_data import SAMPLE_ENTRIES


def table_from_entries(entries: list[dict[str, Any]]) -> MetadataTable:
    return parse_metadata(json.dumps(entries))


def write_config(path: Path, entries: list[dict[str, Any]] | str) -> Path:
    """Write entries (or raw text) to path as the metadata configuration file."""
    text = entries if isinstance(entries, str) else json.dumps(entries)
    path.write_text(text, encoding="utf-8")
    return path


class FailingRenderer:
    """Implements PageRenderer for tests; always fails like a broken template would."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def render(self, record: MetadataRecord) -> str:
        self.calls.append(record.pkg)
        raise RenderError(f"boom rendering {record.pkg}")


class CountingLoader:
    """Implements MetadataLoader for tests; hands out tables (or raises) in sequence."""

    def __init__(self, results: list[MetadataTable | Exception]) -> None:
        self._results = list(results)
        self.calls = 0

    def load(self) -> MetadataTable:
        self.calls += 1
        result = self._results.pop(0) if len(self._results) > 1 else self._results[0]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture()
def sample_table() -> MetadataTable:
    return table_from_entries(SAMPLE_ENTRIES)


@pytest.fixture()
def metadata_store(sample_table: MetadataTable) -> MetadataStore:
    return MetadataStore(sample_table)


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    return write_config(tmp_path / "config.json", SAMPLE_ENTRIES)


@pytest.fixture()
def test_app(metadata_store: MetadataStore) -> FastAPI:
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)
    app.state.metadata_store = metadata_store
    app.state.page_renderer = JinjaPageRenderer()
    install_error_handlers(app)
    app.include_router(health_router)
    app.include_router(go_import_router)
    return app
