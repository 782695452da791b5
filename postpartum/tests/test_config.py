import os
import unittest
from unittest import mock

from postpartum.utilities.config import _optional_float


class TestOptionalFloat(unittest.TestCase):

    def test_unset_is_none(self):
        with mock.patch.dict(os.environ, {"GENERATOR_TIMEOUT": "  "}):
            self.assertIsNone(_optional_float("GENERATOR_TIMEOUT"))

    def test_number(self):
        with mock.patch.dict(os.environ, {"GENERATOR_TIMEOUT": "12.5"}):
            self.assertEqual(_optional_float("GENERATOR_TIMEOUT"), 12.5)

    def test_malformed_value_falls_back_to_none(self):
        with mock.patch.dict(os.environ, {"GENERATOR_TIMEOUT": "thirty"}):
            with self.assertLogs("postpartum.utilities.config", level="WARNING"):
                self.assertIsNone(_optional_float("GENERATOR_TIMEOUT"))
