"""Core Layer — pure game logic, no IO, no logging, no global randomness.

Invariants:
    - No module in core/ imports from services/, schemas/, or infrastructure/
    - All functions are pure; randomness arrives through a RandomSource argument

Design Decisions:
    - Functional core separated from imperative shell (services/game_session.py)
    - State is frozen dataclasses replaced wholesale on every transition
"""
