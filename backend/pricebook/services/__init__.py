"""Services Layer — imperative shell: persistence functions and the page controller.

Invariants:
    - Services call core/ for every rule (validation, filtering, draft shaping)
    - Persistence functions commit their own transaction; one mutation per call

Design Decisions:
    - Plain async functions for persistence, one class for the stateful page
"""
