"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the service layer so the in‑memory
representation can change without touching the HTTP contract.
"""
