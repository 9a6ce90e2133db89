"""HTTP tests through the FastAPI app with a fresh in-memory store per test."""

import unittest

from fastapi.testclient import TestClient

from photodesk.main import app
from photodesk.storage import MemStorage, get_storage


class ApiTestCase(unittest.TestCase):
    """Base: overrides the storage dependency and offers register/login helpers."""

    def setUp(self) -> None:
        self.store = MemStorage()
        app.dependency_overrides[get_storage] = lambda: self.store
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()

    def register(self, username: str, password: str = "password123") -> dict:
        resp = self.client.post(
            "/api/auth/register",
            json={"username": username, "email": f"{username}@example.com", "password": password},
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def login(self, username: str, password: str = "password123") -> dict[str, str]:
        resp = self.client.post(
            "/api/auth/login", json={"username": username, "password": password}
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        return {"Authorization": f"Bearer {resp.json()['access_token']}"}

    def photographer(self, username: str) -> dict[str, str]:
        self.register(username)
        return self.login(username)

    def create_client(self, headers: dict[str, str], name: str = "Dana") -> dict:
        resp = self.client.post(
            "/api/clients", json={"name": name, "email": f"{name.lower()}@example.com"}, headers=headers
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()

    def create_job(self, headers: dict[str, str], client_id: int, **fields) -> dict:
        body = {"client_id": client_id, "title": "Wedding", **fields}
        resp = self.client.post("/api/photo-jobs", json=body, headers=headers)
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()


class TestRootAndHealth(ApiTestCase):
    def test_root(self) -> None:
        resp = self.client.get("/")
        self.assertEqual(resp.json(), {"message": "PhotoDesk API"})

    def test_health_reports_memory_backend(self) -> None:
        resp = self.client.get("/api/health/")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["storage"], "memory")
        self.assertIsNone(body["database"])

    def test_status_catalog(self) -> None:
        resp = self.client.get("/api/job-statuses")
        self.assertEqual(resp.status_code, 200)
        values = [entry["value"] for entry in resp.json()]
        self.assertEqual(values[0], "TBC")
        self.assertEqual(values[-1], "COMPLETED")
        self.assertEqual(len(values), 8)


class TestAuth(ApiTestCase):
    def test_register_and_me(self) -> None:
        user = self.register("ansel")
        self.assertNotIn("password_hash", user)
        self.assertEqual(user["role"], "photographer")
        headers = self.login("ansel")
        resp = self.client.get("/api/auth/me", headers=headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["username"], "ansel")

    def test_update_profile_settings(self) -> None:
        self.register("ansel")
        headers = self.login("ansel")
        resp = self.client.patch(
            "/api/auth/me",
            json={"iban": "DE89370400440532013000", "bank_name": "First Bank"},
            headers=headers,
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["iban"], "DE89370400440532013000")
        self.assertNotIn("password_hash", resp.json())

        resp = self.client.patch("/api/auth/me", json={"bic_code": "COBADEFFXXX"}, headers=headers)
        body = resp.json()
        self.assertEqual(body["bic_code"], "COBADEFFXXX")
        self.assertEqual(body["bank_name"], "First Bank")
        self.assertEqual(body["username"], "ansel")

    def test_profile_update_ignores_account_fields(self) -> None:
        self.register("ansel")
        headers = self.login("ansel")
        resp = self.client.patch(
            "/api/auth/me", json={"role": "admin", "username": "root"}, headers=headers
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["role"], "photographer")
        self.assertEqual(resp.json()["username"], "ansel")
        self.assertEqual(self.client.patch("/api/auth/me", json={}).status_code, 401)

    def test_duplicate_username_is_400(self) -> None:
        self.register("ansel")
        resp = self.client.post(
            "/api/auth/register",
            json={"username": "ansel", "email": "other@example.com", "password": "password123"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"message": "Username already taken"})

    def test_wrong_password_is_401(self) -> None:
        self.register("ansel")
        resp = self.client.post(
            "/api/auth/login", json={"username": "ansel", "password": "not-the-one"}
        )
        self.assertEqual(resp.status_code, 401)
        self.assertIn("message", resp.json())

    def test_missing_or_bad_token_is_401(self) -> None:
        self.assertEqual(self.client.get("/api/clients").status_code, 401)
        resp = self.client.get("/api/clients", headers={"Authorization": "Bearer garbage"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"message": "Invalid or expired token"})

    def test_malformed_body_is_400_with_message(self) -> None:
        resp = self.client.post("/api/auth/register", json={"username": "x"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "Invalid input")
        self.assertTrue(resp.json()["errors"])


class TestOwnerScopedResources(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.alice = self.photographer("alice")
        self.bob = self.photographer("bob")

    def test_client_crud_and_isolation(self) -> None:
        client = self.create_client(self.alice, "Dana")
        self.assertEqual([c["id"] for c in self.client.get("/api/clients", headers=self.alice).json()], [client["id"]])
        self.assertEqual(self.client.get("/api/clients", headers=self.bob).json(), [])

        resp = self.client.get(f"/api/clients/{client['id']}", headers=self.bob)
        self.assertEqual(resp.status_code, 403)

        resp = self.client.patch(
            f"/api/clients/{client['id']}", json={"phone": "555"}, headers=self.alice
        )
        self.assertEqual(resp.json()["phone"], "555")
        self.assertEqual(resp.json()["name"], "Dana")

        resp = self.client.delete(f"/api/clients/{client['id']}", headers=self.alice)
        self.assertEqual(resp.json(), {"success": True})
        resp = self.client.get(f"/api/clients/{client['id']}", headers=self.alice)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Client not found"})

    def test_equipment_and_event(self) -> None:
        client = self.create_client(self.alice)
        item = self.client.post(
            "/api/equipment", json={"name": "Body", "type": "camera"}, headers=self.alice
        ).json()
        self.assertEqual(item["status"], "available")
        resp = self.client.post(
            "/api/events",
            json={
                "title": "Shoot",
                "date": "2026-05-01T09:00:00Z",
                "client_id": client["id"],
                "equipment_ids": [item["id"]],
            },
            headers=self.alice,
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["equipment_ids"], [item["id"]])

        resp = self.client.patch(
            f"/api/equipment/{item['id']}", json={"status": "in_use"}, headers=self.bob
        )
        self.assertEqual(resp.status_code, 403)

    def test_team_owner_only(self) -> None:
        team = self.client.post("/api/teams", json={"name": "Studio"}, headers=self.alice).json()
        self.assertEqual(self.client.get(f"/api/teams/{team['id']}", headers=self.bob).status_code, 403)
        resp = self.client.patch(
            f"/api/teams/{team['id']}", json={"name": "Studio North"}, headers=self.alice
        )
        self.assertEqual(resp.json()["name"], "Studio North")

    def test_team_creator_becomes_member(self) -> None:
        team = self.client.post("/api/teams", json={"name": "Studio"}, headers=self.alice).json()
        me = self.client.get("/api/auth/me", headers=self.alice).json()
        self.assertEqual(me["team_id"], team["id"])

        resp = self.client.get(f"/api/teams/{team['id']}", headers=self.alice)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json()["members"],
            [{"id": me["id"], "username": "alice", "email": "alice@example.com", "role": "photographer"}],
        )
        self.assertEqual(self.client.get("/api/teams/current", headers=self.alice).json()["id"], team["id"])
        self.assertIsNone(self.client.get("/api/teams/current", headers=self.bob).json())

    def test_team_member_can_view_but_not_edit(self) -> None:
        team = self.client.post("/api/teams", json={"name": "Studio"}, headers=self.alice).json()
        bob_id = self.client.get("/api/auth/me", headers=self.bob).json()["id"]
        self.store.set_user_team(bob_id, team["id"])

        resp = self.client.get(f"/api/teams/{team['id']}", headers=self.bob)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([m["username"] for m in resp.json()["members"]], ["alice", "bob"])
        resp = self.client.patch(f"/api/teams/{team['id']}", json={"name": "Mine"}, headers=self.bob)
        self.assertEqual(resp.status_code, 403)

        self.client.delete(f"/api/teams/{team['id']}", headers=self.alice)
        self.assertIsNone(self.client.get("/api/auth/me", headers=self.bob).json()["team_id"])

    def test_equipment_presets(self) -> None:
        body = self.client.post(
            "/api/equipment", json={"name": "Body", "type": "camera"}, headers=self.alice
        ).json()
        bobs = self.client.post(
            "/api/equipment", json={"name": "Drone", "type": "drone"}, headers=self.bob
        ).json()

        resp = self.client.post(
            "/api/equipment-presets",
            json={"name": "Wedding kit", "type": "wedding", "equipment_ids": [body["id"]]},
            headers=self.alice,
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        preset = resp.json()
        self.assertEqual(preset["equipment_ids"], [body["id"]])
        self.assertEqual(
            [p["id"] for p in self.client.get("/api/equipment-presets", headers=self.alice).json()],
            [preset["id"]],
        )
        self.assertEqual(self.client.get("/api/equipment-presets", headers=self.bob).json(), [])

        url = f"/api/equipment-presets/{preset['id']}"
        self.assertEqual(self.client.get(url, headers=self.bob).status_code, 403)
        self.assertEqual(self.client.delete(url, headers=self.bob).status_code, 403)

        resp = self.client.patch(url, json={"equipment_ids": [bobs["id"]]}, headers=self.alice)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"message": f"Unknown equipment ids: {bobs['id']}"})

        resp = self.client.patch(url, json={"name": "Elopement kit"}, headers=self.alice)
        self.assertEqual(resp.json()["name"], "Elopement kit")
        self.assertEqual(resp.json()["equipment_ids"], [body["id"]])

        self.assertEqual(self.client.delete(url, headers=self.alice).json(), {"success": True})
        resp = self.client.get(url, headers=self.alice)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Equipment preset not found"})


class TestPhotoJobsApi(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.alice = self.photographer("alice")
        self.bob = self.photographer("bob")
        self.dana = self.create_client(self.alice, "Dana")

    def test_create_defaults_and_read_model(self) -> None:
        job = self.create_job(self.alice, self.dana["id"], password="s3cret")
        self.assertEqual(job["status"], "TBC")
        self.assertAlmostEqual(job["progress"], 12.5)
        self.assertTrue(job["has_password"])
        self.assertNotIn("password", job)
        self.assertEqual(job["client"], {"name": "Dana", "email": "dana@example.com"})

    def test_invalid_status_is_400(self) -> None:
        job = self.create_job(self.alice, self.dana["id"])
        resp = self.client.patch(
            f"/api/photo-jobs/{job['id']}", json={"status": "SHIPPED"}, headers=self.alice
        )
        self.assertEqual(resp.status_code, 400)

    def test_other_users_job_is_403_and_unknown_is_404(self) -> None:
        job = self.create_job(self.alice, self.dana["id"])
        self.assertEqual(self.client.get(f"/api/photo-jobs/{job['id']}", headers=self.bob).status_code, 403)
        self.assertEqual(self.client.delete(f"/api/photo-jobs/{job['id']}", headers=self.bob).status_code, 403)
        self.assertEqual(self.client.get("/api/photo-jobs/9999", headers=self.alice).status_code, 404)

    def test_job_for_foreign_client_is_403(self) -> None:
        resp = self.client.post(
            "/api/photo-jobs", json={"client_id": self.dana["id"], "title": "Nope"}, headers=self.bob
        )
        self.assertEqual(resp.status_code, 403)

    def test_owner_comments(self) -> None:
        job = self.create_job(self.alice, self.dana["id"])
        resp = self.client.post(
            f"/api/photo-jobs/{job['id']}/comments", json={"content": ""}, headers=self.alice
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"message": "Comment content is required"})

        resp = self.client.post(
            f"/api/photo-jobs/{job['id']}/comments", json={"content": "Edits done"}, headers=self.alice
        )
        self.assertEqual(resp.status_code, 200)
        self.assertFalse(resp.json()["is_from_client"])

        resp = self.client.post(
            f"/api/photo-jobs/{job['id']}/comments", json={"content": "Hi"}, headers=self.bob
        )
        self.assertEqual(resp.status_code, 403)

    def test_portal_link(self) -> None:
        job = self.create_job(self.alice, self.dana["id"])
        resp = self.client.post(
            f"/api/photo-jobs/{job['id']}/portal-link", json={"password": "s3cret"}, headers=self.alice
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        self.assertTrue(body["download_link"].startswith(f"/client-portal/portal_{job['id']}_"))
        self.assertIsNotNone(body["download_expiry"])
        self.assertTrue(body["has_password"])

    def test_verify_password_endpoint(self) -> None:
        job = self.create_job(self.alice, self.dana["id"], password="s3cret")
        url = f"/api/photo-jobs/{job['id']}/verify-password"
        self.assertEqual(self.client.post(url, json={}).status_code, 400)
        resp = self.client.post(url, json={"password": "wrong"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"message": "Invalid password"})
        resp = self.client.post(url, json={"password": "s3cret"})
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()["success"])
        self.assertFalse(resp.json()["job"]["locked"])
        self.assertEqual(
            self.client.post("/api/photo-jobs/9999/verify-password", json={"password": "x"}).status_code,
            404,
        )


class TestClientPortalApi(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.alice = self.photographer("alice")
        dana = self.create_client(self.alice, "Dana")
        self.job = self.create_job(
            self.alice,
            dana["id"],
            password="s3cret",
            status="READY_FOR_REVIEW",
            description="Ceremony and reception",
            job_date="2026-06-01T15:00:00Z",
            download_link="https://files.example.com/wedding",
            download_expiry="2026-07-01T00:00:00Z",
        )
        self.url = f"/api/client-portal/{self.job['id']}"

    def test_locked_without_password(self) -> None:
        resp = self.client.get(self.url)
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertTrue(body["locked"])
        self.assertEqual(body["comments"], [])
        self.assertNotIn("password", body)
        self.assertEqual(body["title"], "Wedding")
        self.assertEqual(body["status"], "READY_FOR_REVIEW")
        for hidden in ("description", "job_date", "download_link", "download_expiry", "client"):
            self.assertIsNone(body[hidden], hidden)
        self.assertEqual(body["actions"], {"can_comment": False, "can_approve": False})
        self.assertNotIn("dana@example.com", resp.text)

    def test_unlocked_with_header(self) -> None:
        self.client.post(f"{self.url}/comments", json={"content": "Beautiful", "password": "s3cret"})
        resp = self.client.get(self.url, headers={"X-Portal-Password": "s3cret"})
        body = resp.json()
        self.assertFalse(body["locked"])
        self.assertEqual([c["content"] for c in body["comments"]], ["Beautiful"])
        self.assertEqual(body["download_link"], "https://files.example.com/wedding")
        self.assertEqual(body["client"]["email"], "dana@example.com")
        self.assertTrue(body["actions"]["can_comment"])

    def test_client_comment_errors(self) -> None:
        resp = self.client.post(f"{self.url}/comments", json={"content": "Hi"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"message": "Password is required"})
        resp = self.client.post(f"{self.url}/comments", json={"content": "Hi", "password": "bad"})
        self.assertEqual(resp.status_code, 401)
        resp = self.client.post(f"{self.url}/comments", json={"content": "", "password": "s3cret"})
        self.assertEqual(resp.status_code, 400)
        resp = self.client.post("/api/client-portal/9999/comments", json={"content": "Hi"})
        self.assertEqual(resp.status_code, 404)

    def test_client_comment_is_flagged(self) -> None:
        resp = self.client.post(f"{self.url}/comments", json={"content": "Yes!", "password": "s3cret"})
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()["is_from_client"])

    def test_deleting_job_removes_portal(self) -> None:
        self.client.delete(f"/api/photo-jobs/{self.job['id']}", headers=self.alice)
        self.assertEqual(self.client.get(self.url).status_code, 404)


if __name__ == "__main__":
    unittest.main()
