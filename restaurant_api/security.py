"""Password hashing, JWT tokens and the authenticated request context"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from restaurant_api.config import settings
from restaurant_api.models.user import User, UserRole

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Higher levels include the permissions of lower ones
ROLE_LEVELS = {
    UserRole.CUSTOMER: 1,
    UserRole.ADMIN: 2,
}


@dataclass(frozen=True)
class AuthContext:
    """Identity of the signed-in caller, passed explicitly to operations"""
    user_id: int
    username: str
    email: str
    role: UserRole

    def has_role(self, required_role: UserRole) -> bool:
        """Check if the caller has at least the required role level"""
        return ROLE_LEVELS.get(self.role, 0) >= ROLE_LEVELS.get(required_role, 0)

    @property
    def is_admin(self) -> bool:
        return self.has_role(UserRole.ADMIN)

    @classmethod
    def from_user(cls, user: User) -> "AuthContext":
        return cls(
            user_id=user.id,
            username=user.username,
            email=user.email,
            role=user.role or UserRole.CUSTOMER,
        )


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash"""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash password"""
    return pwd_context.hash(password)


def create_access_token(user: User) -> str:
    """Create JWT access token"""
    expire = datetime.utcnow() + timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": str(user.id),
        "role": (user.role or UserRole.CUSTOMER).value,
        "exp": expire,
        "type": "access",
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def create_refresh_token(user: User) -> str:
    """Create JWT refresh token"""
    expire = datetime.utcnow() + timedelta(days=settings.refresh_token_expire_days)
    payload = {
        "sub": str(user.id),
        "exp": expire,
        "type": "refresh",
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str, expected_type: str) -> Optional[int]:
    """Return the user id carried by a valid token of the given type"""
    try:
        payload = jwt.decode(
            token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
        )
    except JWTError:
        return None

    user_id = payload.get("sub")
    if user_id is None or payload.get("type") != expected_type:
        return None

    try:
        return int(user_id)
    except ValueError:
        return None
