"""Auth route: find-or-create login by external user id (no passwords)."""
from typing import Annotated

from fastapi import APIRouter, Depends

from resume_learning.routers.deps import get_identity_service
from resume_learning.schemas.user import LoginRequest, LoginResponse
from resume_learning.services.identity import IdentityService

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    identity: Annotated[IdentityService, Depends(get_identity_service)],
):
    """Create the user on first login; later logins only refresh updatedAt."""
    user = await identity.find_or_create(body.user_id, body.name)
    return LoginResponse(message="Login successful", data=user, user=user)
