"""Registration and login: hash on the way in, verify and issue a token on the way out."""

import logging

from sqlalchemy import String, type_coerce
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import DuplicateUsername, InvalidCredentials, UnknownRole, UserNotFound
from app.core.roles import Role
from app.core.security import create_access_token, hash_password, verify_password
from app.models import Pengguna
from app.schemas.auth import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)


def register_user(db: Session, body: RegisterRequest) -> Pengguna:
    """
    Create a user with a bcrypt-hashed password.

    Username uniqueness is left to the database unique index so two concurrent
    registrations cannot both succeed; the losing insert becomes DuplicateUsername.
    """
    user = Pengguna(
        nama_pengguna=body.nama_pengguna,
        kata_sandi=hash_password(body.kata_sandi),
        peran_pengguna=Role(body.peran_pengguna),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info(
            "Registration rejected: username taken",
            extra={"nama_pengguna": body.nama_pengguna},
        )
        raise DuplicateUsername() from e
    db.refresh(user)
    logger.info(
        "User registered",
        extra={"id_pengguna": user.id_pengguna, "peran_pengguna": user.peran_pengguna.value},
    )
    return user


def authenticate(db: Session, body: LoginRequest) -> str:
    """
    Check credentials and return a signed access token for the user.

    The role is read as its raw column text so that a row written before the
    role constraint existed fails as UnknownRole, after the password check.
    """
    user = (
        db.query(
            Pengguna.id_pengguna,
            Pengguna.kata_sandi,
            type_coerce(Pengguna.peran_pengguna, String).label("peran_pengguna"),
        )
        .filter(Pengguna.nama_pengguna == body.nama_pengguna)
        .first()
    )
    if user is None:
        logger.info("Login failed: unknown user", extra={"nama_pengguna": body.nama_pengguna})
        raise UserNotFound()
    if not verify_password(body.kata_sandi, user.kata_sandi):
        logger.info("Login failed: bad password", extra={"id_pengguna": user.id_pengguna})
        raise InvalidCredentials()
    try:
        role = Role(user.peran_pengguna)
    except ValueError as e:
        logger.warning(
            "Login refused: stored role is not recognised",
            extra={"id_pengguna": user.id_pengguna, "peran_pengguna": user.peran_pengguna},
        )
        raise UnknownRole() from e
    return create_access_token(user.id_pengguna, role)
