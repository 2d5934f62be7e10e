"""Catalog Loader — reads a card catalog JSON file into a validated Catalog.

Invariants:
    - Unreadable files and schema violations both surface as CatalogLoadError
    - No path configured ⇒ the built-in DEFAULT_CATALOG
    - Buzzer filtering happens here, once, before any session starts
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from spinwheel.core.card_data import DEFAULT_CATALOG
from spinwheel.core.catalog import Catalog
from spinwheel.core.errors import CatalogLoadError
from spinwheel.schemas.catalog import CatalogSchema

logger = logging.getLogger(__name__)


def load_catalog_file(path: str | Path) -> Catalog:
    """Parse and validate a catalog file."""
    source = str(path)
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogLoadError(e.strerror or str(e), source) from e

    try:
        schema = CatalogSchema.model_validate_json(raw)
    except ValidationError as e:
        raise CatalogLoadError(
            f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}",
            source,
        ) from e

    catalog = schema.to_domain()
    logger.info(
        "Catalog loaded from %s: %d rule groups, %d prompts, %d modifiers",
        source, len(catalog.rule_groups), len(catalog.prompts),
        len(catalog.modifiers),
    )
    return catalog


def load_catalog(path: str | Path | None = None, buzzer_enabled: bool = True) -> Catalog:
    """Catalog for a new game: file when configured, defaults otherwise."""
    catalog = load_catalog_file(path) if path else DEFAULT_CATALOG
    if not buzzer_enabled:
        catalog = catalog.without_buzzer_rules()
    if catalog.is_empty:
        logger.warning("Card catalog is empty; the wheel will have no segments")
    return catalog
