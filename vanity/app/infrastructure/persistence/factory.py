"""Metadata loader factory: selects implementation from config. Only place that imports concrete loaders."""
from __future__ import annotations

from vanity.app.config.settings import Settings
from vanity.app.infrastructure.persistence.json_file.json_metadata_loader import JsonFileMetadataLoader
from vanity.app.ports.metadata_loader import MetadataLoader


def create_metadata_loader(settings: Settings) -> MetadataLoader:
    backend = settings.metadata_backend.strip().lower()

    if backend in ("json",):
        return JsonFileMetadataLoader(settings.config_path)

    raise ValueError(f"Unsupported metadata backend: {backend}")
