"""Catalog Schemas — validation of catalog files at the boundary.

Invariants:
    - Blank names/texts rejected, surrounding whitespace stripped
    - Unknown modifier types and special flags rejected
    - Duplicate ids within a section rejected
    - to_domain() yields frozen core objects
"""

import pytest
from pydantic import ValidationError

from spinwheel.core.catalog import Catalog
from spinwheel.core.domain_types import ModifierType, RuleSpecial
from spinwheel.schemas.catalog import (
    CatalogSchema, ModifierSchema, PromptSchema, RuleGroupSchema,
)


def _group(group_id=1, special=None, flipped_special=None):
    return {
        "id": group_id,
        "name": "Voice",
        "primary_rule": {"id": group_id * 100 + 1, "name": "Sing", "description": "Sing.", "special": special},
        "flipped_rule": {"id": group_id * 100 + 2, "name": "Flat", "description": "Flat.", "special": flipped_special},
    }


def test_prompt_strips_text():
    assert PromptSchema(id=1, text="  Tell a joke ").text == "Tell a joke"


def test_prompt_blank_rejected():
    with pytest.raises(ValidationError):
        PromptSchema(id=1, text="   ")


def test_modifier_type_validated():
    assert ModifierSchema(id=1, type="CLONE", name="Clone", description="Copy.").type == ModifierType.CLONE
    with pytest.raises(ValidationError):
        ModifierSchema(id=1, type="TELEPORT", name="x", description="y")


def test_rule_group_special_parsed():
    group = RuleGroupSchema.model_validate(_group(special="BUZZER", flipped_special="BUZZER"))
    assert group.primary_rule.special == RuleSpecial.BUZZER


def test_rule_group_faces_must_agree_on_special():
    with pytest.raises(ValidationError):
        RuleGroupSchema.model_validate(_group(special="BUZZER"))


def test_duplicate_prompt_ids_rejected():
    with pytest.raises(ValidationError, match="duplicate prompts ids"):
        CatalogSchema.model_validate({
            "prompts": [{"id": 1, "text": "a"}, {"id": 1, "text": "b"}],
        })


def test_missing_sections_default_empty():
    assert CatalogSchema.model_validate({}).to_domain() == Catalog()


def test_to_domain_builds_catalog():
    catalog = CatalogSchema.model_validate({
        "rule_groups": [_group(1), _group(2)],
        "prompts": [{"id": 1, "text": "Sell a pen"}],
        "modifiers": [{"id": 1, "type": "FLIP", "name": "Flip", "description": "Flip it."}],
    }).to_domain()
    assert [g.id for g in catalog.rule_groups] == [1, 2]
    assert catalog.rule_groups[1].flipped_rule.id == 202
    assert catalog.prompts[0].text == "Sell a pen"
    assert catalog.modifiers[0].type == ModifierType.FLIP
