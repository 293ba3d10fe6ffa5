"""ORM model for application users (auth and role gate)."""

from sqlalchemy import Column, DateTime, Enum, Integer, String, func

from app.core.roles import Role
from app.models.base import Base


class Pengguna(Base):
    """
    User account for JWT authentication.

    kata_sandi holds the bcrypt hash, never the plain password.
    peran_pengguna is stored as the Role value under a CHECK constraint;
    no route changes it after registration.
    """

    __tablename__ = "pengguna"

    id_pengguna = Column(Integer, primary_key=True, autoincrement=True)
    nama_pengguna = Column(String(255), nullable=False, unique=True, index=True)
    kata_sandi = Column(String(255), nullable=False)
    peran_pengguna = Column(
        Enum(
            Role,
            name="peran_pengguna",
            native_enum=False,
            create_constraint=True,
            validate_strings=True,
            length=32,
            values_callable=lambda roles: [r.value for r in roles],
        ),
        nullable=False,
        default=Role.PETUGAS_KEUANGAN,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
