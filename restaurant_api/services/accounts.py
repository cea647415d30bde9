"""Customer registration, login and preferences"""

from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from restaurant_api.config import settings
from restaurant_api.errors import ErrorCode
from restaurant_api.models.menu import MenuItem
from restaurant_api.models.user import User, UserRole
from restaurant_api.schemas.auth import (
    Token,
    UserCreate,
    PreferencesUpdate,
    RegisterResult,
    LoginResult,
)
from restaurant_api.schemas.common import ActionResult
from restaurant_api.security import (
    AuthContext,
    verify_password,
    get_password_hash,
    create_access_token,
    create_refresh_token,
    decode_token,
)

logger = structlog.get_logger()


async def get_user(db: AsyncSession, user_id: int) -> Optional[User]:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def register_user(db: AsyncSession, user_data: UserCreate) -> RegisterResult:
    """Create a customer account"""
    user = User(
        username=user_data.username,
        hashed_password=get_password_hash(user_data.password),
        email=user_data.email,
        phone=user_data.phone,
        address=user_data.address,
        role=UserRole.CUSTOMER,
        registration_date=datetime.utcnow(),
    )
    db.add(user)

    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.info("Registration rejected, duplicate account")
        return RegisterResult(
            success=False,
            message="Username or email is already registered",
            error=ErrorCode.CONFLICT,
        )
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Registration failed")
        return RegisterResult(
            success=False,
            message="Registration failed, please try again",
            error=ErrorCode.TRANSACTION_FAILURE,
        )

    logger.info("User registered", user_id=user.id)
    return RegisterResult(success=True, user_id=user.id, message="Registration successful!")


async def _issue_tokens(db: AsyncSession, user: User) -> Token:
    access_token = create_access_token(user)
    refresh_token = create_refresh_token(user)

    # Store refresh token so it can be rotated and revoked
    user.refresh_token = refresh_token
    await db.commit()

    return Token(
        access_token=access_token,
        refresh_token=refresh_token,
        expires_in=settings.access_token_expire_minutes * 60,
    )


def _storage_failure(result_cls, message: str):
    return result_cls(success=False, message=message, error=ErrorCode.TRANSACTION_FAILURE)


async def authenticate(db: AsyncSession, username: str, password: str) -> LoginResult:
    """Verify credentials and issue tokens"""
    try:
        result = await db.execute(select(User).where(User.username == username))
        user = result.scalar_one_or_none()

        if not user or not verify_password(password, user.hashed_password):
            logger.info("Login failed")
            return LoginResult(
                success=False,
                message="Invalid username or password",
                error=ErrorCode.UNAUTHORIZED,
            )

        if not user.is_active:
            return LoginResult(
                success=False,
                message="User account is disabled",
                error=ErrorCode.UNAUTHORIZED,
            )

        user_id = user.id
        user.last_login = datetime.utcnow()
        token = await _issue_tokens(db, user)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Login could not be completed")
        return _storage_failure(LoginResult, "Login failed, please try again")

    logger.info("User logged in", user_id=user_id)
    return LoginResult(success=True, message="Login successful!", token=token)


async def refresh_tokens(db: AsyncSession, refresh_token: str) -> LoginResult:
    """Exchange a stored refresh token for a new token pair"""
    user_id = decode_token(refresh_token, "refresh")

    try:
        user = await get_user(db, user_id) if user_id is not None else None

        if not user or not user.is_active or user.refresh_token != refresh_token:
            return LoginResult(
                success=False,
                message="Invalid refresh token",
                error=ErrorCode.UNAUTHORIZED,
            )

        token = await _issue_tokens(db, user)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Token refresh failed", user_id=user_id)
        return _storage_failure(LoginResult, "Token refresh failed, please try again")

    return LoginResult(success=True, message="Token refreshed", token=token)


async def logout(db: AsyncSession, context: AuthContext) -> ActionResult:
    """Revoke the caller's refresh token"""
    try:
        user = await get_user(db, context.user_id)
        if user:
            user.refresh_token = None
            await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Logout failed", user_id=context.user_id)
        return _storage_failure(ActionResult, "Logout failed, please try again")

    logger.info("User logged out", user_id=context.user_id)
    return ActionResult(success=True, message="Logout successful!")


async def update_preferences(
    db: AsyncSession,
    context: AuthContext,
    preferences: PreferencesUpdate,
) -> ActionResult:
    """Save favorite item, delivery notes and newsletter opt-in"""
    try:
        user = await get_user(db, context.user_id)
        if not user:
            return ActionResult(success=False, message="User not found", error=ErrorCode.NOT_FOUND)

        if preferences.favorite_item is not None:
            result = await db.execute(select(MenuItem.id).where(MenuItem.id == preferences.favorite_item))
            if result.scalar_one_or_none() is None:
                return ActionResult(
                    success=False,
                    message="Favorite item does not exist",
                    error=ErrorCode.VALIDATION_ERROR,
                )

        user.favorite_item = preferences.favorite_item
        user.delivery_notes = preferences.delivery_notes
        user.newsletter_subscription = preferences.newsletter_subscription

        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Preferences update failed", user_id=context.user_id)
        return _storage_failure(ActionResult, "Error updating preferences")

    return ActionResult(success=True, message="Preferences updated successfully!")
