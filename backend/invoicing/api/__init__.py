"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes translate form transport into handler calls and State into responses

Design Decisions:
    - Thin routes delegate to services/
"""
