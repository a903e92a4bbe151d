"""
Authentication Service

Issues and verifies the JWT bearer tokens that identify players. Accounts
live with the hosting platform; the token carries the user id and username.
"""

import datetime
from typing import Any, Dict, Optional

import jwt


class AuthService:
    """
    Stateless token service.
    """

    ALGORITHM = "HS256"

    def __init__(self, jwt_secret: str, expiration_days: int = 7):
        """
        Args:
            jwt_secret: Secret key for JWT token signing
            expiration_days: Lifetime of issued tokens
        """
        self.jwt_secret = jwt_secret
        self.expiration_days = expiration_days

    def issue_token(self, user_id: str, username: str) -> str:
        """
        Create a signed token for a user.

        Args:
            user_id: User's unique identifier
            username: Display name

        Returns:
            Encoded JWT
        """
        now = datetime.datetime.now(datetime.timezone.utc)
        payload = {
            "user_id": user_id,
            "username": username,
            "iat": now,
            "exp": now + datetime.timedelta(days=self.expiration_days),
        }
        return jwt.encode(payload, self.jwt_secret, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a JWT token.

        Args:
            token: JWT token string

        Returns:
            Dictionary with success status and user data or error
        """
        if not token:
            return {"success": False, "error": "Token is required"}

        try:
            payload = jwt.decode(token, self.jwt_secret, algorithms=[self.ALGORITHM])
        except jwt.ExpiredSignatureError:
            return {"success": False, "error": "Token has expired"}
        except jwt.InvalidTokenError:
            return {"success": False, "error": "Invalid token"}

        user_id = payload.get("user_id")
        if not user_id:
            return {"success": False, "error": "Invalid token payload"}

        return {
            "success": True,
            "user": {
                "id": str(user_id),
                "username": payload.get("username") or "Anonymous",
            }
        }


# Global service instance
_auth_service = None


def get_auth_service() -> Optional[AuthService]:
    """Get the global auth service instance."""
    return _auth_service


def initialize_auth_service(jwt_secret: str, expiration_days: int = 7) -> AuthService:
    """Initialize the global auth service instance."""
    global _auth_service
    _auth_service = AuthService(jwt_secret, expiration_days)
    return _auth_service
