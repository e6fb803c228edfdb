"""User accounts: registration, credential checks, admin management and soft delete."""

import logging
from functools import lru_cache

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.security import hash_password, normalize_role, verify_password
from app.models import User
from app.models.base import fits_int_column
from app.services.errors import ConflictError, InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _username_taken(db: Session, username: str, exclude_id: int | None = None) -> bool:
    query = db.query(User.id).filter(User.username == username)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    return query.first() is not None


def create_user(
    db: Session,
    full_name: str,
    username: str,
    password: str,
    role: str | None = None,
) -> User:
    """
    Create an active user with a bcrypt password hash.

    Raises InvalidInputError when full name, username or password is blank and
    ConflictError when the username already exists.
    """
    if _is_blank(full_name) or _is_blank(username) or _is_blank(password):
        raise InvalidInputError("fullName, username and password are required")
    if _username_taken(db, username):
        raise ConflictError("Username already exists")

    user = User(
        full_name=full_name,
        username=username,
        password_hash=hash_password(password),
        role=normalize_role(role),
        is_active=True,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("Username already exists") from e
    db.refresh(user)
    logger.info("Created user id=%s username=%s role=%s", user.id, user.username, user.role)
    return user


@lru_cache(maxsize=1)
def _dummy_password_hash() -> str:
    """bcrypt hash checked when no usable account exists, so failures cost the same time."""
    return hash_password("no-such-account")


def authenticate_user(db: Session, username: str, password: str) -> User | None:
    """
    Return the active user matching username and password, else None.

    Unknown username, wrong password and inactive account are not distinguished,
    neither in the result nor in the password work performed.
    """
    user = db.query(User).filter(User.username == username).first()
    if user is None or not user.is_active:
        verify_password(password, _dummy_password_hash())
        logger.info("Login failed for username=%s", username)
        return None
    if not verify_password(password, user.password_hash):
        logger.info("Login failed for username=%s", username)
        return None
    return user


def get_user(db: Session, user_id: int) -> User | None:
    if not fits_int_column(user_id):
        return None
    return db.query(User).filter(User.id == user_id).first()


def get_role(db: Session, user_id: int) -> str | None:
    """Current role of an active user_id, or None when the user is missing or deactivated."""
    if not fits_int_column(user_id):
        return None
    return (
        db.query(User.role)
        .filter(User.id == user_id, User.is_active.is_(True))
        .scalar()
    )


def list_users(db: Session, include_inactive: bool = False) -> list[User]:
    """All users ordered by id; inactive ones only when include_inactive is set."""
    query = db.query(User)
    if not include_inactive:
        query = query.filter(User.is_active.is_(True))
    return query.order_by(User.id).all()


def update_user(
    db: Session,
    user_id: int,
    full_name: str | None = None,
    username: str | None = None,
    role: str | None = None,
) -> None:
    """Update the given fields of a user. None means leave unchanged."""
    if full_name is not None and _is_blank(full_name):
        raise InvalidInputError("fullName must not be blank")
    if username is not None and _is_blank(username):
        raise InvalidInputError("username must not be blank")
    if not fits_int_column(user_id):
        raise NotFoundError("User not found")

    values: dict[str, str] = {}
    if full_name is not None:
        values["full_name"] = full_name
    if username is not None:
        if _username_taken(db, username, exclude_id=user_id):
            raise ConflictError("Username already exists")
        values["username"] = username
    if role is not None:
        values["role"] = normalize_role(role)

    if not values:
        if get_user(db, user_id) is None:
            raise NotFoundError("User not found")
        return

    try:
        affected = (
            db.query(User)
            .filter(User.id == user_id)
            .update(values, synchronize_session=False)
        )
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("Username already exists") from e
    if affected != 1:
        db.rollback()
        raise NotFoundError("User not found")
    db.commit()
    logger.info("Updated user id=%s fields=%s", user_id, sorted(values))


def set_user_active(db: Session, user_id: int, active: bool) -> None:
    """Soft delete (active=False) or restore (active=True) a user."""
    if not fits_int_column(user_id):
        raise NotFoundError("User not found")
    affected = (
        db.query(User)
        .filter(User.id == user_id)
        .update({"is_active": active}, synchronize_session=False)
    )
    if affected != 1:
        db.rollback()
        raise NotFoundError("User not found")
    db.commit()
    logger.info("%s user id=%s", "Restored" if active else "Deactivated", user_id)
