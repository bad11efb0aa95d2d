"""Unit tests for postapi.core.config.Settings validators."""

import unittest

from pydantic import ValidationError

from postapi.core.config import Settings


class TestSettingsDefaults(unittest.TestCase):
    def test_defaults(self) -> None:
        s = Settings(_env_file=None, DATABASE_URL="sqlite:///./blog.db", BCRYPT_ROUNDS=12)
        self.assertEqual(s.APP_ENV, "dev")
        self.assertEqual(s.API_PREFIX, "")
        self.assertEqual(s.TOKEN_BYTES, 16)
        self.assertEqual(s.BCRYPT_ROUNDS, 12)


class TestSettingsValidation(unittest.TestCase):
    def test_database_url_must_be_sqlite(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DATABASE_URL="postgresql://localhost/blog")
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DATABASE_URL="  ")

    def test_in_memory_url_allowed(self) -> None:
        self.assertEqual(Settings(_env_file=None, DATABASE_URL=" sqlite:// ").DATABASE_URL, "sqlite://")

    def test_bcrypt_rounds_range(self) -> None:
        for bad in (3, 17):
            with self.subTest(rounds=bad), self.assertRaises(ValidationError):
                Settings(_env_file=None, BCRYPT_ROUNDS=bad)

    def test_token_bytes_keeps_128_bits(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, TOKEN_BYTES=8)

    def test_log_level_normalized(self) -> None:
        self.assertEqual(Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="loud")

    def test_api_prefix(self) -> None:
        self.assertEqual(Settings(_env_file=None, API_PREFIX="/api/").API_PREFIX, "/api")
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, API_PREFIX="api")
