from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from pydantic import BaseModel

from core.config import settings
from core.logging_config import logger
from models.enums import UserRole


# ============================================================
# Current Principal (identity handed over by the auth gateway)
# ============================================================
class CurrentPrincipal(BaseModel):
    role: UserRole
    user_id: Optional[str] = None


# ============================================================
# IDENTITY DECODING (no credential checks happen here)
# ============================================================
def get_current_principal(request: Request) -> CurrentPrincipal:
    """
    Read the already-authenticated identity from request headers.

    Missing role → 401. Unknown role token → 403; never guessed.
    """
    raw_role = request.headers.get(settings.ROLE_HEADER)
    if not raw_role:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing principal role",
        )

    try:
        role = UserRole.parse(raw_role)
    except ValueError:
        logger.warning("Rejected unknown role token: %r", raw_role)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Unknown role: {raw_role}",
        )

    user_id = request.headers.get(settings.USER_ID_HEADER) or None
    return CurrentPrincipal(role=role, user_id=user_id)


# ============================================================
# ROLE CHECKER (basic role list guard)
# ============================================================
def requires_role(allowed_roles: list[UserRole]):
    def checker(principal: CurrentPrincipal = Depends(get_current_principal)):
        if principal.role not in allowed_roles:
            raise HTTPException(
                status_code=403,
                detail=f"Requires one of: {[str(r) for r in allowed_roles]}",
            )
        return principal
    return checker

