"""Root conftest — shared fixtures for game tests."""

import os

import pytest

from spinwheel.config import Settings, get_settings
from spinwheel.core.catalog import Catalog, Modifier, Prompt, Rule, RuleGroup
from spinwheel.core.domain_types import ModifierType, RuleSpecial

# Ensure tests never pick up a developer's catalog or seed
os.environ.pop("SPINWHEEL_CATALOG_PATH", None)
os.environ.pop("SPINWHEEL_RANDOM_SEED", None)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def small_catalog():
    """3 rule groups, 4 prompts, 2 modifiers, every category non-empty."""
    return Catalog(
        rule_groups=(
            RuleGroup(1, "Voice", Rule(101, "Sing", "Sing it."), Rule(102, "Monotone", "Flat.")),
            RuleGroup(2, "Manner", Rule(201, "Polite", "Be nice."), Rule(202, "Rude", "Be rude.")),
            RuleGroup(3, "Humor", Rule(301, "No jokes", "Allergic."), Rule(302, "Laugh", "Always.")),
        ),
        prompts=tuple(Prompt(i, f"Prompt {i}") for i in range(1, 5)),
        modifiers=(
            Modifier(1, ModifierType.FLIP, "Flip", "Flip a rule."),
            Modifier(2, ModifierType.SWAP, "Swap", "Swap a rule."),
        ),
    )


@pytest.fixture
def buzzer_group():
    return RuleGroup(
        13, "Buzzer",
        Rule(1301, "Kiss the mirror", "On buzz.", RuleSpecial.BUZZER),
        Rule(1302, "Insult the mirror", "On buzz.", RuleSpecial.BUZZER),
    )
