import json
import tempfile
import unittest
from datetime import date, datetime
from pathlib import Path

from postpartum.domain.Settings import Settings
from postpartum.domain.ShoppingList import ShoppingItem, ShoppingList
from postpartum.infra.Plan_Repository import PlanRepository
from postpartum.infra.Settings_Repository import SettingsRepository
from postpartum.infra.ShoppingList_Repository import ShoppingListRepository
from postpartum.tests.fakes import make_plan


class TestRepositories(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_settings_defaults_when_missing(self):
        repo = SettingsRepository(self.dir / "settings.json")
        settings = repo.load(today=date(2024, 6, 1))
        self.assertEqual(settings, Settings(start_date=date(2024, 6, 1)))
        self.assertTrue(settings.lactation_support)
        self.assertFalse(settings.senior_mode)

    def test_settings_round_trip(self):
        repo = SettingsRepository(self.dir / "settings.json")
        settings = Settings(date(2024, 5, 20), dislikes=("coriander",), allergies=("peanut",), senior_mode=True)
        repo.save(settings)
        self.assertEqual(repo.load(today=date(2024, 6, 1)), settings)
        stored = json.loads((self.dir / "settings.json").read_text(encoding="utf-8"))
        self.assertEqual(stored["start_date"], "2024-05-20")

    def test_settings_corrupt_file(self):
        path = self.dir / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        self.assertEqual(SettingsRepository(path).load(today=date(2024, 6, 1)).start_date, date(2024, 6, 1))
        path.write_text('{"start_date": "yesterday"}', encoding="utf-8")
        self.assertEqual(SettingsRepository(path).load(today=date(2024, 6, 1)).start_date, date(2024, 6, 1))

    def test_plan_round_trip_and_clear(self):
        repo = PlanRepository(self.dir / "plan.json")
        self.assertIsNone(repo.load())
        plan = make_plan(4)
        repo.save(plan)
        self.assertEqual(repo.load(), plan)
        repo.clear()
        self.assertIsNone(repo.load())
        repo.clear()

    def test_plan_missing_day_is_ignored(self):
        path = self.dir / "plan.json"
        path.write_text('{"meals": []}', encoding="utf-8")
        self.assertIsNone(PlanRepository(path).load())

    def test_shopping_list_round_trip(self):
        repo = ShoppingListRepository(self.dir / "nested" / "list.json")
        shopping_list = ShoppingList(
            datetime(2024, 6, 1, 9, 30), 7,
            (ShoppingItem("Eggs", "10", "Other", True), ShoppingItem("Ginger", "1 piece", "Vegetables")),
        )
        repo.save(shopping_list)
        self.assertEqual(repo.load(), shopping_list)
        repo.clear()
        self.assertIsNone(repo.load())

    def test_write_leaves_no_temp_files(self):
        repo = PlanRepository(self.dir / "plan.json")
        repo.save(make_plan(1))
        repo.save(make_plan(2))
        self.assertEqual([p.name for p in self.dir.iterdir()], ["plan.json"])
        self.assertEqual(repo.load().day, 2)
