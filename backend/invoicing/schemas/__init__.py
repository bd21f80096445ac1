"""Pydantic Schemas — response contracts shared by handlers and routes.

Invariants:
    - Schemas describe what leaves the service (State, listing rows)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
