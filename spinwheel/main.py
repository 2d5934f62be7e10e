"""Spin That Wheel — process entry point for a rendering layer.

Invariants:
    - Logging configured once, before the first session starts
    - Catalog read once at startup (file or built-in defaults)
    - Seeded RNG when SPINWHEEL_RANDOM_SEED is set, for reproducible games
"""

import logging
import random

from spinwheel.config import Settings, get_settings
from spinwheel.infrastructure.catalog_loader import load_catalog
from spinwheel.infrastructure.observability import setup_logging
from spinwheel.services.game_session import GameSession

logger = logging.getLogger(__name__)


def bootstrap(settings: Settings | None = None, player_count: int | None = None) -> GameSession:
    """Configure logging, load cards, and return a started GameSession."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    catalog = load_catalog(settings.catalog_path, settings.buzzer_enabled)
    session = GameSession(
        catalog, settings=settings, rng=random.Random(settings.random_seed),
    )
    session.start(player_count)
    logger.info("Spin That Wheel ready", extra={"session_id": session.session_id})
    return session
