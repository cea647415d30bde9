"""Authentication API endpoints"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer, OAuth2PasswordRequestForm
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from restaurant_api.database import get_db
from restaurant_api.errors import ErrorCode, raise_for_failure
from restaurant_api.models.user import User, UserRole
from restaurant_api.schemas.auth import (
    Token,
    RefreshRequest,
    UserCreate,
    UserResponse,
    PreferencesUpdate,
    RegisterResult,
)
from restaurant_api.schemas.common import ActionResult
from restaurant_api.security import AuthContext, decode_token
from restaurant_api.services import accounts

router = APIRouter()
logger = structlog.get_logger()

# OAuth2 scheme
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def _load_user(db: AsyncSession, user_id: int) -> Optional[User]:
    try:
        return await accounts.get_user(db, user_id)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("User lookup failed", user_id=user_id)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service temporarily unavailable, please try again",
        )


async def _resolve_context(token: str, db: AsyncSession) -> AuthContext:
    user_id = decode_token(token, "access")
    if user_id is None:
        raise _credentials_exception()

    user = await _load_user(db, user_id)
    if user is None or not user.is_active:
        raise _credentials_exception()

    return AuthContext.from_user(user)


async def get_current_context(
    token: str = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
) -> AuthContext:
    """Authenticated caller; rejects anonymous requests"""
    return await _resolve_context(token, db)


async def get_optional_context(
    token: Optional[str] = Depends(optional_oauth2_scheme),
    db: AsyncSession = Depends(get_db),
) -> Optional[AuthContext]:
    """Authenticated caller, or None for guests. A bad token is still rejected."""
    if not token:
        return None
    return await _resolve_context(token, db)


def require_role(required_role: UserRole):
    """Dependency factory for role-based access control"""
    async def role_checker(context: AuthContext = Depends(get_current_context)) -> AuthContext:
        if not context.has_role(required_role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return context
    return role_checker


@router.post("/register", response_model=RegisterResult, status_code=201)
async def register(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a customer account"""
    result = await accounts.register_user(db, user_data)
    raise_for_failure(result)
    return result


@router.post("/login", response_model=Token)
async def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """Authenticate user and return tokens"""
    result = await accounts.authenticate(db, form_data.username, form_data.password)

    if result.error == ErrorCode.UNAUTHORIZED:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=result.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
    raise_for_failure(result)

    return result.token


@router.post("/refresh", response_model=Token)
async def refresh_token(
    request: RefreshRequest,
    db: AsyncSession = Depends(get_db),
):
    """Refresh access token using refresh token"""
    result = await accounts.refresh_tokens(db, request.refresh_token)
    raise_for_failure(result)
    return result.token


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    context: AuthContext = Depends(get_current_context),
    db: AsyncSession = Depends(get_db),
):
    """Get current user information"""
    user = await _load_user(db, context.user_id)
    if not user:
        raise _credentials_exception()
    return user


@router.put("/me/preferences", response_model=ActionResult)
async def update_preferences(
    preferences: PreferencesUpdate,
    context: AuthContext = Depends(get_current_context),
    db: AsyncSession = Depends(get_db),
):
    """Update favorite item, delivery notes and newsletter opt-in"""
    result = await accounts.update_preferences(db, context, preferences)
    raise_for_failure(result)
    return result


@router.post("/logout", response_model=ActionResult)
async def logout(
    context: AuthContext = Depends(get_current_context),
    db: AsyncSession = Depends(get_db),
):
    """Logout user by invalidating refresh token"""
    return await accounts.logout(db, context)
