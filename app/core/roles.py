"""Closed set of user roles carried in tokens and checked by the role gate."""

from enum import Enum


class Role(str, Enum):
    """Role label stored on a user (peran_pengguna) and embedded in its tokens."""

    PETUGAS_KEUANGAN = "petugas_keuangan"
    MANAJER_KEUANGAN = "manajer_keuangan"
    ADMIN = "admin"
