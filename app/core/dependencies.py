from fastapi import HTTPException, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.security import jwt_manager

security = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials = Security(security),
) -> int:
    """
    Dependency that requires a valid Bearer token and returns the user id it carries.
    Raises 401 Unauthorized if the token is missing, invalid, or not a user token.
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = jwt_manager.verify_token(credentials.credentials, "access")
    user_id = payload.get("user_id")

    if not isinstance(user_id, int) or isinstance(user_id, bool) or user_id <= 0:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token: Not a valid user token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user_id
