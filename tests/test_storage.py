"""Storage contract tests run against both backends, plus MemStorage-specific behavior."""

import threading
import unittest
from datetime import datetime, timedelta, timezone

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from photodesk.core.errors import NotFoundError
from photodesk.models import Base
from photodesk.schemas.clients import ClientCreate, ClientUpdate
from photodesk.schemas.comments import PhotoJobCommentCreate, PhotoJobCommentUpdate
from photodesk.schemas.equipment import (
    EquipmentCreate,
    EquipmentPresetCreate,
    EquipmentPresetUpdate,
    EquipmentUpdate,
)
from photodesk.schemas.events import EventCreate, EventUpdate
from photodesk.schemas.photo_jobs import PhotoJobCreate, PhotoJobUpdate
from photodesk.schemas.teams import TeamCreate, TeamUpdate
from photodesk.schemas.users import UserCreate, UserProfileUpdate
from photodesk.storage import MemStorage, SqlStorage


class TickingClock:
    """Deterministic clock: every call is one second after the previous one."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        self.now += self.step
        return self.now


class StorageContract:
    """Behavior every Storage backend must share. Subclasses provide make_store."""

    def make_store(self, clock=None):
        raise NotImplementedError

    def setUp(self) -> None:
        self.clock = TickingClock()
        self.store = self.make_store(self.clock)
        self.alice = self.store.create_user(
            UserCreate(username="alice", email="alice@example.com", password_hash="x")
        )
        self.bob = self.store.create_user(
            UserCreate(username="bob", email="bob@example.com", password_hash="x")
        )

    def _client(self, user_id: int, name: str = "Acme", **fields):
        return self.store.create_client(
            ClientCreate(name=name, email=f"{name.lower()}@example.com", user_id=user_id, **fields)
        )

    def _job(self, user_id: int, client_id: int, title: str = "Wedding", **fields):
        return self.store.create_photo_job(
            PhotoJobCreate(user_id=user_id, client_id=client_id, title=title, **fields)
        )

    def _comment(self, job_id: int, content: str, is_from_client: bool = False):
        return self.store.create_photo_job_comment(
            PhotoJobCommentCreate(job_id=job_id, content=content, is_from_client=is_from_client)
        )

    # Users

    def test_user_lookup_by_username_and_email(self) -> None:
        self.assertEqual(self.store.get_user_by_username("alice").id, self.alice.id)
        self.assertEqual(self.store.get_user_by_email("bob@example.com").id, self.bob.id)
        self.assertIsNone(self.store.get_user_by_username("carol"))
        self.assertIsNone(self.store.get_user(9999))

    def test_profile_update_merges_bank_fields(self) -> None:
        self.store.update_user(
            self.alice.id, UserProfileUpdate(iban="DE89370400440532013000", bank_name="First Bank")
        )
        updated = self.store.update_user(self.alice.id, UserProfileUpdate(bic_code="COBADEFFXXX"))
        self.assertEqual(updated.iban, "DE89370400440532013000")
        self.assertEqual(updated.bank_name, "First Bank")
        self.assertEqual(updated.bic_code, "COBADEFFXXX")
        self.assertEqual(updated.username, "alice")
        self.assertEqual(updated.password_hash, "x")
        self.assertEqual(self.store.get_user(self.alice.id).bic_code, "COBADEFFXXX")
        with self.assertRaises(NotFoundError):
            self.store.update_user(9999, UserProfileUpdate(iban="x"))

    # Generic CRUD semantics

    def test_ids_are_distinct_per_table(self) -> None:
        first = self._client(self.alice.id, "One")
        second = self._client(self.alice.id, "Two")
        self.assertGreater(second.id, first.id)

    def test_update_merges_and_keeps_unset_fields(self) -> None:
        client = self._client(self.alice.id, notes="Prefers mornings", phone="123")
        updated = self.store.update_client(client.id, ClientUpdate(phone="456"))
        self.assertEqual(updated.phone, "456")
        self.assertEqual(updated.notes, "Prefers mornings")
        self.assertEqual(updated.name, "Acme")
        self.assertEqual(self.store.get_client(client.id).phone, "456")

    def test_update_missing_record_raises_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            self.store.update_client(9999, ClientUpdate(name="Ghost"))
        with self.assertRaises(NotFoundError):
            self.store.update_photo_job(9999, PhotoJobUpdate(title="Ghost"))
        with self.assertRaises(NotFoundError):
            self.store.update_photo_job_comment(9999, PhotoJobCommentUpdate(content="x"))

    def test_delete_missing_record_is_a_no_op(self) -> None:
        self.store.delete_client(9999)
        self.store.delete_equipment(9999)
        self.store.delete_event(9999)
        self.store.delete_team(9999)
        self.store.delete_photo_job(9999)

    def test_reads_return_none_for_missing_ids(self) -> None:
        self.assertIsNone(self.store.get_client(9999))
        self.assertIsNone(self.store.get_equipment(9999))
        self.assertIsNone(self.store.get_event(9999))
        self.assertIsNone(self.store.get_team(9999))
        self.assertIsNone(self.store.get_photo_job(9999))
        self.assertIsNone(self.store.get_photo_job_comment(9999))

    def test_listing_is_owner_scoped(self) -> None:
        self._client(self.alice.id, "A1")
        self._client(self.alice.id, "A2")
        self._client(self.bob.id, "B1")
        names = [c.name for c in self.store.list_clients_by_user(self.alice.id)]
        self.assertEqual(names, ["A1", "A2"])
        self.assertEqual(len(self.store.list_clients_by_user(self.bob.id)), 1)

    def test_equipment_and_events_round_trip(self) -> None:
        client = self._client(self.alice.id)
        item = self.store.create_equipment(
            EquipmentCreate(name="Body", type="camera", user_id=self.alice.id)
        )
        self.assertEqual(item.status, "available")
        item = self.store.update_equipment(item.id, EquipmentUpdate(status="maintenance"))
        self.assertEqual(item.status, "maintenance")
        self.assertEqual(item.name, "Body")

        event = self.store.create_event(
            EventCreate(
                title="Shoot",
                date=datetime(2026, 5, 1, 9, tzinfo=timezone.utc),
                client_id=client.id,
                equipment_ids=[item.id],
                user_id=self.alice.id,
            )
        )
        event = self.store.update_event(event.id, EventUpdate(notes="Bring reflector"))
        self.assertEqual(event.equipment_ids, [item.id])
        self.assertEqual(event.title, "Shoot")
        self.assertEqual([e.id for e in self.store.list_events_by_user(self.alice.id)], [event.id])
        self.assertEqual(self.store.list_events_by_user(self.bob.id), [])

    def test_team_crud(self) -> None:
        team = self.store.create_team(TeamCreate(name="Studio", owner_id=self.alice.id))
        team = self.store.update_team(team.id, TeamUpdate(name="Studio North"))
        self.assertEqual(team.name, "Studio North")
        self.assertEqual(team.owner_id, self.alice.id)
        self.store.delete_team(team.id)
        self.assertIsNone(self.store.get_team(team.id))

    def test_team_membership_and_delete_detaches_members(self) -> None:
        team = self.store.create_team(TeamCreate(name="Studio", owner_id=self.alice.id))
        self.store.set_user_team(self.alice.id, team.id)
        joined = self.store.set_user_team(self.bob.id, team.id)
        self.assertEqual(joined.team_id, team.id)
        members = self.store.list_users_by_team(team.id)
        self.assertEqual([u.username for u in members], ["alice", "bob"])
        with self.assertRaises(NotFoundError):
            self.store.set_user_team(9999, team.id)

        self.store.delete_team(team.id)

        self.assertEqual(self.store.list_users_by_team(team.id), [])
        self.assertIsNone(self.store.get_user(self.alice.id).team_id)
        self.assertIsNone(self.store.get_user(self.bob.id).team_id)

    def test_equipment_preset_crud(self) -> None:
        body = self.store.create_equipment(
            EquipmentCreate(name="Body", type="camera", user_id=self.alice.id)
        )
        lens = self.store.create_equipment(
            EquipmentCreate(name="85mm", type="lens", user_id=self.alice.id)
        )
        preset = self.store.create_equipment_preset(
            EquipmentPresetCreate(
                name="Wedding kit",
                type="wedding",
                equipment_ids=[body.id, lens.id],
                user_id=self.alice.id,
            )
        )
        self.assertEqual(self.store.get_equipment_preset(preset.id).equipment_ids, [body.id, lens.id])

        renamed = self.store.update_equipment_preset(
            preset.id, EquipmentPresetUpdate(name="Portrait kit")
        )
        self.assertEqual(renamed.equipment_ids, [body.id, lens.id])
        self.assertEqual(renamed.type, "wedding")
        emptied = self.store.update_equipment_preset(
            preset.id, EquipmentPresetUpdate(equipment_ids=[])
        )
        self.assertEqual(emptied.equipment_ids, [])
        self.assertEqual(emptied.name, "Portrait kit")

        presets = self.store.list_equipment_presets_by_user(self.alice.id)
        self.assertEqual([p.id for p in presets], [preset.id])
        self.assertEqual(self.store.list_equipment_presets_by_user(self.bob.id), [])
        with self.assertRaises(NotFoundError):
            self.store.update_equipment_preset(9999, EquipmentPresetUpdate(name="Ghost"))

        self.store.delete_equipment_preset(preset.id)
        self.store.delete_equipment_preset(preset.id)
        self.assertIsNone(self.store.get_equipment_preset(preset.id))

    # Photo jobs

    def test_new_job_defaults_to_tbc_with_timestamps(self) -> None:
        client = self._client(self.alice.id)
        job = self._job(self.alice.id, client.id)
        self.assertEqual(job.status, "TBC")
        self.assertIsNotNone(job.created_at)
        self.assertEqual(job.created_at, job.updated_at)

    def test_update_refreshes_updated_at_only(self) -> None:
        client = self._client(self.alice.id)
        job = self._job(self.alice.id, client.id)
        updated = self.store.update_photo_job(job.id, PhotoJobUpdate(status="CONFIRMED"))
        self.assertEqual(updated.status, "CONFIRMED")
        self.assertEqual(updated.created_at, job.created_at)
        self.assertGreater(updated.updated_at, job.updated_at)
        self.assertEqual(updated.title, "Wedding")

    def test_job_password_is_stored_hashed(self) -> None:
        client = self._client(self.alice.id)
        job = self._job(self.alice.id, client.id, password="secret")
        self.assertIsNotNone(job.password)
        self.assertNotEqual(job.password, "secret")
        self.assertTrue(self.store.verify_photo_job_password(job.id, "secret"))
        self.assertFalse(self.store.verify_photo_job_password(job.id, "wrong"))

    def test_job_without_password_verifies_anything(self) -> None:
        client = self._client(self.alice.id)
        job = self._job(self.alice.id, client.id)
        self.assertIsNone(job.password)
        self.assertTrue(self.store.verify_photo_job_password(job.id, "anything"))

    def test_verify_password_on_missing_job_is_false(self) -> None:
        self.assertFalse(self.store.verify_photo_job_password(9999, "secret"))

    def test_update_rehashes_and_empty_password_clears(self) -> None:
        client = self._client(self.alice.id)
        job = self._job(self.alice.id, client.id, password="first")
        self.store.update_photo_job(job.id, PhotoJobUpdate(password="second"))
        self.assertFalse(self.store.verify_photo_job_password(job.id, "first"))
        self.assertTrue(self.store.verify_photo_job_password(job.id, "second"))

        self.store.update_photo_job(job.id, PhotoJobUpdate(title="Renamed"))
        self.assertTrue(self.store.verify_photo_job_password(job.id, "second"))

        cleared = self.store.update_photo_job(job.id, PhotoJobUpdate(password=""))
        self.assertIsNone(cleared.password)

    def test_list_jobs_by_user_and_client(self) -> None:
        acme = self._client(self.alice.id, "Acme")
        other = self._client(self.alice.id, "Other")
        j1 = self._job(self.alice.id, acme.id, "One")
        j2 = self._job(self.alice.id, other.id, "Two")
        self.assertEqual([j.id for j in self.store.list_photo_jobs_by_user(self.alice.id)], [j1.id, j2.id])
        self.assertEqual([j.id for j in self.store.list_photo_jobs_by_client(acme.id)], [j1.id])
        self.assertEqual(self.store.list_photo_jobs_by_user(self.bob.id), [])

    def test_delete_job_cascades_to_its_comments_only(self) -> None:
        client = self._client(self.alice.id)
        doomed = self._job(self.alice.id, client.id, "Doomed")
        kept = self._job(self.alice.id, client.id, "Kept")
        c1 = self._comment(doomed.id, "first")
        c2 = self._comment(doomed.id, "second", is_from_client=True)
        c3 = self._comment(kept.id, "other job")

        self.store.delete_photo_job(doomed.id)

        self.assertIsNone(self.store.get_photo_job(doomed.id))
        self.assertIsNone(self.store.get_photo_job_comment(c1.id))
        self.assertIsNone(self.store.get_photo_job_comment(c2.id))
        self.assertEqual(self.store.list_comments_by_job(doomed.id), [])
        self.assertIsNotNone(self.store.get_photo_job_comment(c3.id))
        self.assertEqual(len(self.store.list_comments_by_job(kept.id)), 1)

    def test_delete_client_nulls_references(self) -> None:
        client = self._client(self.alice.id)
        job = self._job(self.alice.id, client.id)
        event = self.store.create_event(
            EventCreate(
                title="Shoot",
                date=datetime(2026, 5, 1, tzinfo=timezone.utc),
                client_id=client.id,
                user_id=self.alice.id,
            )
        )

        self.store.delete_client(client.id)

        self.assertIsNone(self.store.get_client(client.id))
        self.assertIsNone(self.store.get_photo_job(job.id).client_id)
        self.assertIsNone(self.store.get_event(event.id).client_id)

    # Comments

    def test_comments_newest_first(self) -> None:
        client = self._client(self.alice.id)
        job = self._job(self.alice.id, client.id)
        first = self._comment(job.id, "first")
        second = self._comment(job.id, "second")
        third = self._comment(job.id, "third", is_from_client=True)
        ids = [c.id for c in self.store.list_comments_by_job(job.id)]
        self.assertEqual(ids, [third.id, second.id, first.id])

    def test_comment_update_keeps_author_flag(self) -> None:
        client = self._client(self.alice.id)
        job = self._job(self.alice.id, client.id)
        comment = self._comment(job.id, "typo", is_from_client=True)
        updated = self.store.update_photo_job_comment(
            comment.id, PhotoJobCommentUpdate(content="fixed")
        )
        self.assertEqual(updated.content, "fixed")
        self.assertTrue(updated.is_from_client)
        self.assertEqual(updated.job_id, job.id)

    def test_comment_on_missing_job_raises_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            self._comment(9999, "orphan")
        self.assertIsNone(self.store.get_photo_job_comment(1))
        self.assertEqual(self.store.list_comments_by_job(9999), [])

    def test_comment_on_deleted_job_raises_not_found(self) -> None:
        client = self._client(self.alice.id)
        job = self._job(self.alice.id, client.id)
        self.store.delete_photo_job(job.id)
        with self.assertRaises(NotFoundError):
            self._comment(job.id, "too late")
        self.assertEqual(self.store.list_comments_by_job(job.id), [])

    # Timestamps

    def test_datetimes_come_back_as_utc(self) -> None:
        client = self._client(self.alice.id)
        local = timezone(timedelta(hours=2))
        job = self._job(
            self.alice.id, client.id, job_date=datetime(2026, 6, 1, 14, 0, tzinfo=local)
        )
        stored = self.store.get_photo_job(job.id)
        self.assertEqual(stored.job_date, datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc))
        self.assertEqual(stored.job_date.utcoffset(), timedelta(0))
        self.assertEqual(stored.created_at.utcoffset(), timedelta(0))
        comment = self.store.get_photo_job_comment(self._comment(job.id, "hi").id)
        self.assertEqual(comment.created_at.utcoffset(), timedelta(0))


class TestMemStorage(StorageContract, unittest.TestCase):
    def make_store(self, clock=None):
        return MemStorage(clock=clock)

    def test_ids_never_reused_after_delete(self) -> None:
        first = self._client(self.alice.id, "One")
        self.store.delete_client(first.id)
        second = self._client(self.alice.id, "Two")
        self.assertGreater(second.id, first.id)

    def test_id_counters_are_per_table(self) -> None:
        client = self._client(self.alice.id)
        item = self.store.create_equipment(
            EquipmentCreate(name="Lens", type="lens", user_id=self.alice.id)
        )
        self.assertEqual(client.id, 1)
        self.assertEqual(item.id, 1)

    def test_returned_records_are_copies(self) -> None:
        client = self._client(self.alice.id, notes="original")
        client.notes = "mutated outside the store"
        self.assertEqual(self.store.get_client(client.id).notes, "original")

    def test_comment_tie_on_timestamp_breaks_by_id(self) -> None:
        fixed = datetime(2026, 1, 1, tzinfo=timezone.utc)
        store = MemStorage(clock=lambda: fixed)
        user = store.create_user(UserCreate(username="u1", email="u1@example.com", password_hash="x"))
        client = store.create_client(ClientCreate(name="C", email="c@example.com", user_id=user.id))
        job = store.create_photo_job(PhotoJobCreate(user_id=user.id, client_id=client.id, title="T"))
        a = store.create_photo_job_comment(PhotoJobCommentCreate(job_id=job.id, content="a"))
        b = store.create_photo_job_comment(PhotoJobCommentCreate(job_id=job.id, content="b"))
        self.assertEqual([c.id for c in store.list_comments_by_job(job.id)], [b.id, a.id])

    def test_concurrent_creates_get_unique_ids(self) -> None:
        store = MemStorage()
        ids: list[int] = []
        ids_lock = threading.Lock()

        def worker(n: int) -> None:
            for i in range(50):
                client = store.create_client(
                    ClientCreate(name=f"c{n}-{i}", email="c@example.com", user_id=1)
                )
                with ids_lock:
                    ids.append(client.id)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(ids), 400)
        self.assertEqual(len(set(ids)), 400)
        self.assertEqual(len(store.list_clients_by_user(1)), 400)


class TestSqlStorage(StorageContract, unittest.TestCase):
    def make_store(self, clock=None):
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.session = sessionmaker(bind=self.engine, autoflush=False)()
        return SqlStorage(self.session, clock=clock)

    def tearDown(self) -> None:
        self.session.close()
        self.engine.dispose()


if __name__ == "__main__":
    unittest.main()
