"""
Data access layer.

Design rules:
- Views call ONLY functions in `service` (plus `SqlClient` for setup).
- SQL text lives in `queries`; nothing else formats statements.
- No env var reads here (config-only).
"""
