"""Shared setup for endpoint tests: in-memory SQLite behind the FastAPI app."""

import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.core.security import hash_password
from app.main import app
from app.models import Base, User

DEFAULT_PASSWORD = "chilaquiles-123"


class ApiTestCase(unittest.TestCase):
    """Fresh schema per test; get_db is overridden to use the in-memory engine."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.Session = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)

        def override_get_db():
            db = self.Session()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        # Minimum bcrypt cost keeps the suite fast.
        rounds = patch("app.core.security.BCRYPT_ROUNDS", 4)
        rounds.start()
        self.addCleanup(rounds.stop)
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def add_user(
        self,
        username: str,
        password: str = DEFAULT_PASSWORD,
        role: str = "user",
        full_name: str = "Test User",
        is_active: bool = True,
        password_hash: str | None = None,
    ) -> int:
        """Insert a user directly and return its id."""
        with self.Session() as db:
            user = User(
                username=username,
                password_hash=password_hash or hash_password(password),
                full_name=full_name,
                role=role,
                is_active=is_active,
            )
            db.add(user)
            db.commit()
            return user.id

    def login(self, username: str, password: str = DEFAULT_PASSWORD) -> str:
        resp = self.client.post(
            "/api/auth/login", json={"username": username, "password": password}
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()["token"]

    def auth(self, token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    def set_role(self, user_id: int, role: str) -> None:
        with self.Session() as db:
            db.get(User, user_id).role = role
            db.commit()
