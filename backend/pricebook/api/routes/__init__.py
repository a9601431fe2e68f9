"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic (delegate to services/ and core/)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
    - Paths mirror what the page controller requests (/dataPoints, /providers, /settings)
"""

API_PREFIX = "/api/v1"
