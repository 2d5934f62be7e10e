"""Catalog & Session Rules — tests for session creation, flip faces and buzzer filtering."""

import dataclasses

import pytest

from spinwheel.core.card_data import DEFAULT_CATALOG
from spinwheel.core.catalog import Catalog, create_session_rules, find_session_rule


def test_session_rules_mirror_groups(small_catalog):
    rules = create_session_rules(small_catalog.rule_groups)
    assert [r.id for r in rules] == [1, 2, 3]
    assert rules[0].group_name == "Voice"
    assert all(not r.is_flipped for r in rules)
    assert rules[0].active_rule.id == 101
    assert rules[0].inactive_rule.id == 102


def test_toggled_returns_new_rule(small_catalog):
    rule = create_session_rules(small_catalog.rule_groups)[0]
    flipped = rule.toggled()
    assert flipped.is_flipped
    assert flipped.active_rule.id == 102
    assert not rule.is_flipped


def test_session_rule_is_frozen(small_catalog):
    rule = create_session_rules(small_catalog.rule_groups)[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        rule.is_flipped = True


def test_find_session_rule_by_either_face(small_catalog):
    rules = create_session_rules(small_catalog.rule_groups)
    assert find_session_rule(rules, 201).id == 2
    assert find_session_rule(rules, 202).id == 2
    assert find_session_rule(rules, 999) is None


def test_without_buzzer_rules(small_catalog, buzzer_group):
    catalog = dataclasses.replace(
        small_catalog, rule_groups=small_catalog.rule_groups + (buzzer_group,),
    )
    filtered = catalog.without_buzzer_rules()
    assert [g.id for g in filtered.rule_groups] == [1, 2, 3]
    assert filtered.prompts == catalog.prompts


def test_empty_catalog():
    assert Catalog().is_empty


def test_default_catalog_has_every_category():
    assert len(DEFAULT_CATALOG.rule_groups) == 13
    assert DEFAULT_CATALOG.prompts
    assert DEFAULT_CATALOG.modifiers
    assert sum(g.primary_rule.is_buzzer for g in DEFAULT_CATALOG.rule_groups) == 1


def test_default_catalog_ids_unique():
    rule_ids = [
        rule.id
        for g in DEFAULT_CATALOG.rule_groups
        for rule in (g.primary_rule, g.flipped_rule)
    ]
    assert len(rule_ids) == len(set(rule_ids))
    prompt_ids = [p.id for p in DEFAULT_CATALOG.prompts]
    assert len(prompt_ids) == len(set(prompt_ids))
