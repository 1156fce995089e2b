"""Tests for the access gate: authentication and role checks."""

from datetime import UTC, datetime, timedelta

import pytest

from storefront.identity.access import (
    ADMIN_ONLY,
    AuthenticationError,
    AuthorizationError,
    Identity,
    authenticate,
    authorize,
)
from storefront.identity.tokens import issue_token
from storefront.identity.user import Role


class TestAuthenticate:
    def test_valid_bearer_token(self):
        identity = authenticate(f"Bearer {issue_token('user-001', 'user')}")
        assert identity == Identity(user_id="user-001", role=Role.USER)

    def test_admin_identity(self):
        assert authenticate(f"Bearer {issue_token('admin-001', 'admin')}").is_admin

    @pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer   ", "Token abc"])
    def test_missing_token(self, header):
        with pytest.raises(AuthenticationError, match="No token provided"):
            authenticate(header)

    def test_invalid_token(self):
        with pytest.raises(AuthenticationError, match="Invalid token"):
            authenticate("Bearer garbage")

    def test_expired_token(self):
        token = issue_token("user-001", "user", now=datetime.now(UTC) - timedelta(days=3))
        with pytest.raises(AuthenticationError, match="Token expired"):
            authenticate(f"Bearer {token}")

    def test_unknown_role_claim(self):
        with pytest.raises(AuthenticationError):
            authenticate(f"Bearer {issue_token('user-001', 'root')}")


class TestAuthorize:
    def test_any_role_admits_users(self):
        identity = Identity(user_id="u", role=Role.USER)
        assert authorize(identity) is identity

    def test_admin_only_admits_admin(self):
        identity = Identity(user_id="a", role=Role.ADMIN)
        assert authorize(identity, ADMIN_ONLY) is identity

    def test_admin_only_refuses_user(self):
        with pytest.raises(AuthorizationError, match="Access denied"):
            authorize(Identity(user_id="u", role=Role.USER), ADMIN_ONLY)
