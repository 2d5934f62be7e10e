"""Services Layer — imperative shell around the pure core.

Invariants:
    - Services own mutable session state; core modules stay pure
    - Logging happens here, never in core/
"""
