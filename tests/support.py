"""Shared helpers for API tests: in-memory SQLite app client and auth shortcuts."""

import unittest
from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.main import app
from app.models import Base

FINANCE_OFFICER = "petugas_keuangan"


class ApiTestCase(unittest.TestCase):
    """Runs the real app against a fresh in-memory database per test."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.session_factory = sessionmaker(bind=self.engine, autoflush=False)

        def override_get_db() -> Generator[Session, None, None]:
            db = self.session_factory()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app, raise_server_exceptions=False)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def register(
        self,
        username: str = "alice",
        password: str = "secret1",
        role: str = FINANCE_OFFICER,
    ):
        return self.client.post(
            "/register",
            json={"nama_pengguna": username, "kata_sandi": password, "peran_pengguna": role},
        )

    def login(self, username: str = "alice", password: str = "secret1"):
        return self.client.post(
            "/login",
            json={"nama_pengguna": username, "kata_sandi": password},
        )

    def auth_headers(
        self,
        username: str = "alice",
        password: str = "secret1",
        role: str = FINANCE_OFFICER,
    ) -> dict[str, str]:
        """Register (if needed) and log in; return an Authorization header."""
        self.register(username, password, role)
        token = self.login(username, password).json()["accessToken"]
        return {"Authorization": f"Bearer {token}"}
