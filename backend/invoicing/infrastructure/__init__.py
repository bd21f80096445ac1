"""Infrastructure — database, repositories, listing cache, navigation, logging.

Invariants:
    - Concrete implementations of the protocols in core/repository_protocols.py
    - SQLAlchemy exceptions never cross this boundary unmapped
"""
