# core/security.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import HTTPException, status
from jose import JWTError, jwt

from app.core.config import settings

logger = logging.getLogger(__name__)


class JWTManager:
    """JWT handling for the bearer tokens issued by the identity service"""

    def __init__(self):
        self.secret_key = settings.jwt_secret
        self.algorithm = settings.jwt_algorithm
        self.user_token_expire = timedelta(days=settings.jwt_user_expiration)
        self.issuer = settings.jwt_issuer

    def create_access_token(
        self, user_id: int, custom_expiration: Optional[timedelta] = None
    ) -> str:
        """
        Create a JWT access token for a user id.

        Used by the CLI and by tests; production tokens come from the
        identity service sharing the same secret.
        """
        now = datetime.now(timezone.utc)
        expire = now + (custom_expiration or self.user_token_expire)
        payload = {
            "sub": str(user_id),
            "user_id": user_id,
            "exp": int(expire.timestamp()),
            "iat": int(now.timestamp()),
            "iss": self.issuer,
            "type": "access",
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str, token_type: str = "access") -> Dict[str, Any]:
        """
        Decode and validate a token.

        Raises:
            HTTPException: 401 when the token is invalid, expired or of the wrong type
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
            )
        except JWTError as e:
            logger.warning(f"Token verification failed: {e}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Could not validate credentials",
                headers={"WWW-Authenticate": "Bearer"},
            )

        if payload.get("type") != token_type:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=f"Invalid token type, expected {token_type}",
                headers={"WWW-Authenticate": "Bearer"},
            )

        return payload


jwt_manager = JWTManager()
