"""Services Layer: warehouse orchestration on top of the core repositories.

Invariants:
    - The manager is the recovery boundary: StockroomError never escapes a manager operation
    - All console output happens here, never in core/

Design Decisions:
    - Seed dataset kept in its own module so tests can build managers without it
"""
