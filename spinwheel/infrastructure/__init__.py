"""Infrastructure Layer — file loading and cross-cutting concerns.

Invariants:
    - Infrastructure never imports game transitions from core/ (data types only)
    - All file IO wrapped with error mapping to SpinWheelError subclasses
"""
