"""Unit tests for settings validation."""

import unittest

from pydantic import ValidationError

from app.core.config import Settings


class TestDatabaseUrl(unittest.TestCase):
    def test_supported_schemes_accepted(self) -> None:
        for url in (
            "postgresql://u:p@db:5432/chilaquiles",
            "postgresql+psycopg2://u:p@db:5432/chilaquiles",
            "sqlite://",
        ):
            with self.subTest(url=url):
                self.assertEqual(Settings(DATABASE_URL=f"  {url} ").DATABASE_URL, url)

    def test_schemes_without_installed_driver_rejected(self) -> None:
        for url in (
            "mysql://u:p@db:3306/chilaquiles",
            "mysql+pymysql://u:p@db:3306/chilaquiles",
            "postgres://u:p@db:5432/chilaquiles",
            "",
        ):
            with self.subTest(url=url):
                with self.assertRaises(ValidationError):
                    Settings(DATABASE_URL=url)


class TestJwtSettings(unittest.TestCase):
    def test_algorithm_must_be_hmac(self) -> None:
        self.assertEqual(Settings(JWT_ALGORITHM="hs512").JWT_ALGORITHM, "HS512")
        with self.assertRaises(ValidationError):
            Settings(JWT_ALGORITHM="RS256")

    def test_expiry_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(JWT_EXPIRE_MINUTES=0)
        with self.assertRaises(ValidationError):
            Settings(JWT_EXPIRE_MINUTES=10081)


if __name__ == "__main__":
    unittest.main()
