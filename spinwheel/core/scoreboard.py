"""Scoreboard — players, scores and winners for one game.

Invariants:
    - Player ids are 1..count, names default to "Player N", scores start at 0
    - Player count bounded MIN_PLAYERS..MAX_PLAYERS
    - Names are stripped and never blank
    - No winner when every score is negative
"""

from dataclasses import dataclass, replace

from spinwheel.core.domain_types import MAX_PLAYERS, MIN_PLAYERS
from spinwheel.core.errors import (
    InvalidPlayerCountError, InvalidPlayerNameError, PlayerNotFoundError,
)


@dataclass(frozen=True)
class Player:
    id: int
    name: str
    score: int = 0


def create_players(count: int) -> tuple[Player, ...]:
    if not MIN_PLAYERS <= count <= MAX_PLAYERS:
        raise InvalidPlayerCountError(count, MIN_PLAYERS, MAX_PLAYERS)
    return tuple(Player(id=i + 1, name=f"Player {i + 1}") for i in range(count))


def _update(
    players: tuple[Player, ...], player_id: int, **changes: object,
) -> tuple[Player, ...]:
    if not any(p.id == player_id for p in players):
        raise PlayerNotFoundError(player_id)
    return tuple(
        replace(p, **changes) if p.id == player_id else p for p in players
    )


def change_score(
    players: tuple[Player, ...], player_id: int, delta: int,
) -> tuple[Player, ...]:
    current = next((p for p in players if p.id == player_id), None)
    if current is None:
        raise PlayerNotFoundError(player_id)
    return _update(players, player_id, score=current.score + delta)


def rename_player(
    players: tuple[Player, ...], player_id: int, name: str,
) -> tuple[Player, ...]:
    name = name.strip()
    if not name:
        raise InvalidPlayerNameError()
    return _update(players, player_id, name=name)


def ranked(players: tuple[Player, ...]) -> list[Player]:
    """Highest score first; ties keep seating order."""
    return sorted(players, key=lambda p: p.score, reverse=True)


def winners(players: tuple[Player, ...]) -> list[Player]:
    if not players:
        return []
    top = max(p.score for p in players)
    if top < 0:
        return []
    return [p for p in players if p.score == top]
