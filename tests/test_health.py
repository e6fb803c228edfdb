"""Health endpoint and root route."""

import unittest

from harness import ApiTestCase


class TestHealth(ApiTestCase):
    def test_reports_database_connected(self) -> None:
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["database"], "connected")
        self.assertIn(body["environment"], ("dev", "prod"))
        self.assertEqual(body["driver"], "sqlite")

    def test_root(self) -> None:
        self.assertEqual(self.client.get("/").json(), {"message": "Chilaquiles API"})


if __name__ == "__main__":
    unittest.main()
