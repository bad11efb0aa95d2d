"""Unit tests for postapi.core.security: bcrypt hashing, token generation, bearer parsing."""

import unittest

from postapi.core.security import (
    clean_bearer_credentials,
    generate_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing(unittest.TestCase):
    """hash_password / verify_password round trip and rejection."""

    def test_verify_accepts_original_password(self) -> None:
        hashed = hash_password("pw1")
        self.assertTrue(verify_password("pw1", hashed))

    def test_verify_rejects_other_password(self) -> None:
        hashed = hash_password("pw1")
        self.assertFalse(verify_password("pw2", hashed))
        self.assertFalse(verify_password("PW1", hashed))
        self.assertFalse(verify_password("", hashed))

    def test_hash_is_salted_and_not_plaintext(self) -> None:
        first = hash_password("secret")
        second = hash_password("secret")
        self.assertNotEqual(first, second)
        self.assertNotIn("secret", first)
        self.assertTrue(first.startswith("$2"))

    def test_explicit_rounds_are_encoded_in_hash(self) -> None:
        hashed = hash_password("secret", rounds=5)
        self.assertIn("$05$", hashed)

    def test_malformed_hash_returns_false(self) -> None:
        self.assertFalse(verify_password("pw", "not-a-bcrypt-hash"))

    def test_unicode_password(self) -> None:
        hashed = hash_password("пароль")
        self.assertTrue(verify_password("пароль", hashed))


class TestGenerateToken(unittest.TestCase):
    """generate_token returns random hex strings with at least 128 bits."""

    def test_default_length_is_128_bits_hex(self) -> None:
        token = generate_token()
        self.assertEqual(len(token), 32)
        int(token, 16)

    def test_tokens_are_unique(self) -> None:
        tokens = {generate_token() for _ in range(200)}
        self.assertEqual(len(tokens), 200)

    def test_custom_size(self) -> None:
        self.assertEqual(len(generate_token(32)), 64)


class TestCleanBearerCredentials(unittest.TestCase):
    """clean_bearer_credentials trims what HTTPBearer hands over and drops blanks."""

    def test_plain_token_unchanged(self) -> None:
        self.assertEqual(clean_bearer_credentials("abc123"), "abc123")

    def test_surrounding_whitespace_stripped(self) -> None:
        self.assertEqual(clean_bearer_credentials("   abc  "), "abc")

    def test_missing_or_blank(self) -> None:
        self.assertIsNone(clean_bearer_credentials(None))
        self.assertIsNone(clean_bearer_credentials(""))
        self.assertIsNone(clean_bearer_credentials("   "))
