"""Tests for JWT issuing and verification."""

import datetime

import jwt

from turnit.services.auth_service import AuthService

SECRET = "unit-test-secret-that-is-long-enough"


class TestAuthService:
    def test_issued_token_verifies(self):
        auth = AuthService(SECRET)
        result = auth.verify_token(auth.issue_token("t2_alice", "alice"))
        assert result == {"success": True, "user": {"id": "t2_alice", "username": "alice"}}

    def test_missing_token(self):
        assert AuthService(SECRET).verify_token("") == {"success": False, "error": "Token is required"}

    def test_wrong_secret_is_invalid(self):
        token = AuthService(SECRET).issue_token("t2_alice", "alice")
        result = AuthService(SECRET + "-other").verify_token(token)
        assert result == {"success": False, "error": "Invalid token"}

    def test_expired_token(self):
        past = datetime.datetime.now(datetime.timezone.utc) - datetime.timedelta(days=2)
        token = jwt.encode(
            {"user_id": "t2_alice", "username": "alice", "iat": past, "exp": past + datetime.timedelta(days=1)},
            SECRET, algorithm="HS256"
        )
        assert AuthService(SECRET).verify_token(token)["error"] == "Token has expired"

    def test_token_without_user_id(self):
        token = jwt.encode({"username": "alice"}, SECRET, algorithm="HS256")
        assert AuthService(SECRET).verify_token(token)["error"] == "Invalid token payload"

    def test_blank_username_shows_as_anonymous(self):
        auth = AuthService(SECRET)
        result = auth.verify_token(auth.issue_token("t2_bob", ""))
        assert result["user"]["username"] == "Anonymous"
