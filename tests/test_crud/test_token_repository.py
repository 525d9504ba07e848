"""
Tests for the revoked token repository.
"""

from datetime import datetime, timedelta, timezone


class TestRevokedTokenRepository:
    """Tests for SQLAlchemyRevokedTokenRepository."""

    def test_add_y_contains(self, token_repository):
        expires_at = datetime.now(timezone.utc) + timedelta(hours=2)

        token_repository.add("jti-1", "user-1", expires_at)
        token_repository.commit()

        assert token_repository.contains("jti-1") is True
        assert token_repository.contains("jti-2") is False

    def test_add_es_idempotente(self, token_repository):
        expires_at = datetime.now(timezone.utc) + timedelta(hours=2)

        token_repository.add("jti-1", "user-1", expires_at)
        token_repository.add("jti-1", "user-1", expires_at)
        token_repository.commit()

        assert token_repository.contains("jti-1") is True

    def test_purge_expired(self, token_repository):
        now = datetime.now(timezone.utc)
        token_repository.add("expired", "user-1", now - timedelta(minutes=1))
        token_repository.add("active", "user-1", now + timedelta(hours=1))
        token_repository.commit()

        purged = token_repository.purge_expired(now)
        token_repository.commit()

        assert purged == 1
        assert token_repository.contains("expired") is False
        assert token_repository.contains("active") is True
