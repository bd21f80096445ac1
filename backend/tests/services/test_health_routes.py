"""Health Routes — liveness and readiness checks.

Tests cover:
    - liveness reports the configured service identity
    - readiness is 200 with a reachable database
    - readiness is 503 with a named failing check when the manager is gone
"""

from unittest.mock import patch


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy", "service": "invoicing-api", "version": "1.0.0",
    }


async def test_readiness_checks_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_without_database_is_unavailable(client):
    with patch("invoicing.infrastructure.database.db_manager", None):
        res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json() == {
        "status": "not_ready", "checks": {"database": "unavailable"},
    }
