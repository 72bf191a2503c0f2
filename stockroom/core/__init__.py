"""Core Layer: pure inventory logic, no console output, no settings.

Invariants:
    - No module in core/ imports from services/, infrastructure/, or config
    - Repository operations return Success/Failure values, never raise taxonomy errors

Design Decisions:
    - Functional core separated from imperative shell: the manager in services/
      owns output and recovery
"""
