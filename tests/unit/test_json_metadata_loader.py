import json

import pytest

from vanity.app.domain.errors import ConfigError
from vanity.app.infrastructure.persistence.json_file.json_metadata_loader import (
    JsonFileMetadataLoader,
    parse_metadata,
)
from tests.conftest import write_config
from tests.test_data import FOO_ENTRY, SAMPLE_ENTRIES, SOURCE_ENTRY, TOOLS_PATTERN_ENTRY


def test_load_builds_table_keyed_by_pkg(config_file):
    table = JsonFileMetadataLoader(config_file).load()

    assert len(table) == len(SAMPLE_ENTRIES)
    assert set(table.records) == {e["pkg"] for e in SAMPLE_ENTRIES}
    foo = table.records["example.com/foo"]
    assert foo.vcs == "git"
    assert foo.repo == "https://github.com/x/foo"
    assert foo.pattern == ""
    assert foo.matcher is None


def test_load_maps_source_fields(tmp_path):
    path = write_config(tmp_path / "config.json", [SOURCE_ENTRY])
    record = JsonFileMetadataLoader(path).load().records["example.com/src"]

    assert record.source == SOURCE_ENTRY["source"]
    assert record.source_dir == SOURCE_ENTRY["sourcedir"]
    assert record.source_line == SOURCE_ENTRY["sourceline"]


def test_load_compiles_patterns(tmp_path):
    path = write_config(tmp_path / "config.json", [FOO_ENTRY, TOOLS_PATTERN_ENTRY])
    table = JsonFileMetadataLoader(path).load()

    assert [r.pkg for r in table.patterned] == ["example.com/tools"]
    assert table.patterned[0].matcher is not None
    assert table.patterned[0].matches("example.com/tools/cmd/x")


def test_missing_fields_and_nulls_read_as_empty():
    table = parse_metadata('[{"pkg": "example.com/min", "vcs": "git", "repo": "r", "doc": null, "extra": 1}]')
    record = table.records["example.com/min"]

    assert record.doc == ""
    assert record.body == ""
    assert record.source == ""


def test_null_document_is_empty_table():
    assert len(parse_metadata("null")) == 0
    assert len(parse_metadata("[]")) == 0


def test_duplicate_pkg_last_one_wins():
    entries = [
        {"pkg": "example.com/dup", "vcs": "git", "repo": "first"},
        {"pkg": "example.com/dup", "vcs": "git", "repo": "second"},
    ]
    table = parse_metadata(json.dumps(entries))

    assert len(table) == 1
    assert table.records["example.com/dup"].repo == "second"


def test_missing_file_raises_config_error(tmp_path):
    missing = tmp_path / "nope.json"
    with pytest.raises(ConfigError) as exc_info:
        JsonFileMetadataLoader(missing).load()
    assert exc_info.value.path == str(missing)


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        '{"pkg": "example.com/foo"}',
        "[1, 2]",
        '[{"pkg": 5, "vcs": "git", "repo": "r"}]',
    ],
)
def test_malformed_config_raises_config_error(tmp_path, raw):
    path = write_config(tmp_path / "config.json", raw)
    with pytest.raises(ConfigError):
        JsonFileMetadataLoader(path).load()


def test_invalid_pattern_raises_config_error(tmp_path):
    entries = [{"pkg": "example.com/bad", "pattern": "example.com/(unclosed", "vcs": "git", "repo": "r"}]
    path = write_config(tmp_path / "config.json", entries)

    with pytest.raises(ConfigError) as exc_info:
        JsonFileMetadataLoader(path).load()
    assert "example.com/bad" in exc_info.value.reason


def test_load_returns_new_table_each_time(config_file):
    loader = JsonFileMetadataLoader(config_file)
    assert loader.load() is not loader.load()
