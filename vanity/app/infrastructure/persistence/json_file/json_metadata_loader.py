from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from vanity.app.core import SERVICE_NAME
from vanity.app.domain.errors import ConfigError
from vanity.app.domain.models import MetadataRecord, MetadataTable
from vanity.app.schemas.metadata import MetadataEntry, MetadataFile


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def _to_record(entry: MetadataEntry, *, source: str) -> MetadataRecord:
    matcher = None
    if entry.pattern:
        try:
            matcher = re.compile(entry.pattern)
        except re.error as e:
            raise ConfigError(source, f"invalid pattern {entry.pattern!r} for {entry.pkg!r}: {e}") from e
    return MetadataRecord(
        pkg=entry.pkg,
        vcs=entry.vcs,
        repo=entry.repo,
        pattern=entry.pattern,
        source=entry.source,
        source_dir=entry.source_dir,
        source_line=entry.source_line,
        doc=entry.doc,
        body=entry.body,
        matcher=matcher,
    )


def parse_metadata(raw: str | bytes, *, source: str = "<memory>") -> MetadataTable:
    """Decode a JSON array of metadata entries into a new table. Raises ConfigError."""
    try:
        entries = MetadataFile.validate_json(raw)
    except ValidationError as e:
        raise ConfigError(source, f"invalid metadata: {e}") from e
    return MetadataTable.from_records(_to_record(entry, source=source) for entry in entries or [])


class JsonFileMetadataLoader:
    """MetadataLoader implementation reading a JSON file from disk."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> MetadataTable:
        source = str(self._path)
        try:
            raw = self._path.read_bytes()
        except OSError as e:
            raise ConfigError(source, e.strerror or str(e)) from e
        table = parse_metadata(raw, source=source)
        _log("metadata_loaded", path=source, record_count=len(table), pattern_count=len(table.patterned))
        return table
