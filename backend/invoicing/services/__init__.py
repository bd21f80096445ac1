"""Service Layer — imperative shell around the pure core.

Invariants:
    - Every collaborator (repository, cache, navigator, verifier) is injected
    - Each handler issues at most one write statement
"""
