"""Catalog Schemas — Pydantic models for a card catalog JSON file.

Invariants:
    - Names, descriptions and prompt texts are stripped and non-empty
    - Ids unique within each collection (rule groups, prompts, modifiers)
    - A rule group's two faces share the same `special` flag
    - to_domain() is the only way a file becomes a Catalog

Design Decisions:
    - Field names match the catalog file keys (primary_rule, flipped_rule)
    - model_validator for cross-field checks keeps field validators pure
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from spinwheel.core.catalog import Catalog, Modifier, Prompt, Rule, RuleGroup
from spinwheel.core.domain_types import ModifierType, RuleSpecial


def _strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("cannot be empty or whitespace")
    return v


class RuleSchema(BaseModel):
    id: int
    name: str = Field(max_length=200)
    description: str = Field(max_length=1000)
    special: RuleSpecial | None = None

    @field_validator("name", "description")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return _strip_required(v)

    def to_domain(self) -> Rule:
        return Rule(self.id, self.name, self.description, self.special)


class RuleGroupSchema(BaseModel):
    id: int
    name: str = Field(max_length=200)
    primary_rule: RuleSchema
    flipped_rule: RuleSchema

    @field_validator("name")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return _strip_required(v)

    @model_validator(mode="after")
    def faces_agree_on_special(self) -> "RuleGroupSchema":
        if self.primary_rule.special != self.flipped_rule.special:
            raise ValueError(
                f"rule group {self.id}: primary and flipped rules must share `special`"
            )
        return self

    def to_domain(self) -> RuleGroup:
        return RuleGroup(
            self.id, self.name,
            self.primary_rule.to_domain(), self.flipped_rule.to_domain(),
        )


class PromptSchema(BaseModel):
    id: int
    text: str = Field(max_length=500)

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return _strip_required(v)

    def to_domain(self) -> Prompt:
        return Prompt(self.id, self.text)


class ModifierSchema(BaseModel):
    id: int
    type: ModifierType
    name: str = Field(max_length=200)
    description: str = Field(max_length=1000)

    @field_validator("name", "description")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return _strip_required(v)

    def to_domain(self) -> Modifier:
        return Modifier(self.id, self.type, self.name, self.description)


class CatalogSchema(BaseModel):
    """Whole catalog file. Missing sections default to empty."""
    rule_groups: list[RuleGroupSchema] = Field(default_factory=list)
    prompts: list[PromptSchema] = Field(default_factory=list)
    modifiers: list[ModifierSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def unique_ids(self) -> "CatalogSchema":
        for section in ("rule_groups", "prompts", "modifiers"):
            ids = [entry.id for entry in getattr(self, section)]
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            if duplicates:
                raise ValueError(f"duplicate {section} ids: {duplicates}")
        return self

    def to_domain(self) -> Catalog:
        return Catalog(
            rule_groups=tuple(g.to_domain() for g in self.rule_groups),
            prompts=tuple(p.to_domain() for p in self.prompts),
            modifiers=tuple(m.to_domain() for m in self.modifiers),
        )
