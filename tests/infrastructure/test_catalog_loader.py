"""Catalog Loader — tests for file loading, error mapping and buzzer filtering."""

import json

import pytest

from spinwheel.core.card_data import DEFAULT_CATALOG
from spinwheel.core.errors import CatalogLoadError
from spinwheel.infrastructure.catalog_loader import load_catalog, load_catalog_file


def _write(tmp_path, payload):
    path = tmp_path / "cards.json"
    path.write_text(json.dumps(payload) if not isinstance(payload, str) else payload)
    return path


def test_load_catalog_file(tmp_path):
    path = _write(tmp_path, {
        "prompts": [{"id": 1, "text": "Sing a jingle"}],
        "modifiers": [{"id": 2, "type": "SWAP", "name": "Swap", "description": "Swap it."}],
    })
    catalog = load_catalog_file(path)
    assert catalog.prompts[0].text == "Sing a jingle"
    assert catalog.modifiers[0].id == 2
    assert catalog.rule_groups == ()


def test_missing_file_raises(tmp_path):
    with pytest.raises(CatalogLoadError) as exc_info:
        load_catalog_file(tmp_path / "nope.json")
    assert exc_info.value.code == "CATALOG_LOAD_ERROR"


def test_invalid_json_raises(tmp_path):
    with pytest.raises(CatalogLoadError):
        load_catalog_file(_write(tmp_path, "{not json"))


def test_schema_violation_raises(tmp_path):
    path = _write(tmp_path, {"prompts": [{"id": 1, "text": ""}]})
    with pytest.raises(CatalogLoadError, match="validation error"):
        load_catalog_file(path)


def test_no_path_uses_defaults():
    assert load_catalog() is DEFAULT_CATALOG


def test_buzzer_disabled_filters_rules():
    catalog = load_catalog(buzzer_enabled=False)
    assert len(catalog.rule_groups) == len(DEFAULT_CATALOG.rule_groups) - 1
    assert not any(g.primary_rule.is_buzzer for g in catalog.rule_groups)


def test_empty_catalog_logs_warning(tmp_path, caplog):
    path = _write(tmp_path, {})
    with caplog.at_level("WARNING"):
        catalog = load_catalog(path)
    assert catalog.is_empty
    assert "empty" in caplog.text
