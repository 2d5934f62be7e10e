"""Pydantic Schemas — validation for card catalog files at the system boundary.

Invariants:
    - Schemas validate external input; core/ receives only frozen domain objects
    - Domain enums from core/ used for enum fields

Design Decisions:
    - Separate from core: schemas are file contracts, core types are game values
"""
