"""Tests for first-use seeding and the seed CLI's service."""

from api_case import DatabaseTestCase
from sqlalchemy import delete, func, select

from app.models import FAQ, SeedMarker, Theme
from app.services import seed_data
from app.services.seeding import COLLECTIONS, SINGLETONS, ensure_seeded, seed_all


def count(db, model) -> int:
    return db.scalar(select(func.count()).select_from(model))


class TestEnsureSeeded(DatabaseTestCase):
    def test_inserts_defaults_and_marker_once(self) -> None:
        self.assertTrue(ensure_seeded(self.db, FAQ, seed_data.FAQS))
        self.assertEqual(count(self.db, FAQ), len(seed_data.FAQS))
        self.assertIsNotNone(self.db.get(SeedMarker, "faqs"))
        self.assertFalse(ensure_seeded(self.db, FAQ, seed_data.FAQS))
        self.assertEqual(count(self.db, FAQ), len(seed_data.FAQS))

    def test_emptied_collection_is_not_reseeded(self) -> None:
        ensure_seeded(self.db, FAQ, seed_data.FAQS)
        self.db.execute(delete(FAQ))
        self.db.commit()
        self.assertFalse(ensure_seeded(self.db, FAQ, seed_data.FAQS))
        self.assertEqual(count(self.db, FAQ), 0)

    def test_collection_with_rows_is_left_alone(self) -> None:
        self.db.add(FAQ(question="Custom?", answer="Yes"))
        self.db.commit()
        self.assertFalse(ensure_seeded(self.db, FAQ, seed_data.FAQS))
        self.assertEqual(count(self.db, FAQ), 1)
        self.assertIsNone(self.db.get(SeedMarker, "faqs"))

    def test_collection_claimed_by_another_session_inserts_nothing(self) -> None:
        other = self.SessionLocal()
        other.add(SeedMarker(collection="faqs"))
        other.commit()
        other.close()
        self.db.expire_all()
        self.assertFalse(ensure_seeded(self.db, FAQ, seed_data.FAQS))
        self.assertEqual(count(self.db, FAQ), 0)

    def test_defaults_are_not_mutated_by_seeding(self) -> None:
        before = [dict(f) for f in seed_data.FAQS]
        ensure_seeded(self.db, FAQ, seed_data.FAQS)
        self.assertEqual(seed_data.FAQS, before)


class TestSeedAll(DatabaseTestCase):
    def test_seeds_every_collection_then_skips(self) -> None:
        first = seed_all(self.db)
        expected = {m.__tablename__ for m, _ in COLLECTIONS} | {m.__tablename__ for m, _ in SINGLETONS}
        self.assertEqual(set(first), expected)
        self.assertTrue(all(first.values()))
        self.assertFalse(any(seed_all(self.db).values()))

    def test_singletons_are_seeded_active(self) -> None:
        seed_all(self.db)
        themes = list(self.db.scalars(select(Theme)))
        self.assertEqual(len(themes), 1)
        self.assertTrue(themes[0].is_active)
        self.assertEqual(themes[0].active_color_hue, seed_data.THEME["active_color_hue"])
