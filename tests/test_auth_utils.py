"""
Unit tests for password hashing and JWT helpers.
"""
import unittest
from datetime import datetime, timedelta, timezone

from todolist.auth.utils import (
    hash_password,
    verify_password,
    create_access_token,
    decode_access_token,
)

SECRET = "test-secret"
ALGORITHM = "HS256"
ONE_HOUR = timedelta(hours=1)


class TestPasswordHashing(unittest.TestCase):

    def test_hash_is_not_plaintext_and_verifies(self):
        hashed = hash_password("pw1", rounds=4)
        self.assertNotEqual(hashed, "pw1")
        self.assertTrue(verify_password("pw1", hashed))

    def test_wrong_password_fails(self):
        hashed = hash_password("pw1", rounds=4)
        self.assertFalse(verify_password("pw2", hashed))

    def test_salted(self):
        """Same password hashes differently each time."""
        self.assertNotEqual(hash_password("pw1", rounds=4), hash_password("pw1", rounds=4))

    def test_malformed_hash_fails(self):
        self.assertFalse(verify_password("pw1", "not-a-bcrypt-hash"))


class TestAccessTokens(unittest.TestCase):

    def test_round_trip_carries_user_id(self):
        token = create_access_token("user-1", SECRET, ALGORITHM, ONE_HOUR)
        data = decode_access_token(token, SECRET, ALGORITHM)
        self.assertIsNotNone(data)
        self.assertEqual(data.user_id, "user-1")
        self.assertEqual(data.expires_at - data.issued_at, ONE_HOUR)

    def test_accepted_within_validity_window(self):
        issued = datetime.now(timezone.utc) - timedelta(minutes=59)
        token = create_access_token("user-1", SECRET, ALGORITHM, ONE_HOUR, now=issued)
        self.assertIsNotNone(decode_access_token(token, SECRET, ALGORITHM))

    def test_rejected_after_validity_window(self):
        issued = datetime.now(timezone.utc) - timedelta(minutes=61)
        token = create_access_token("user-1", SECRET, ALGORITHM, ONE_HOUR, now=issued)
        self.assertIsNone(decode_access_token(token, SECRET, ALGORITHM))

    def test_wrong_secret_rejected(self):
        token = create_access_token("user-1", "other-secret", ALGORITHM, ONE_HOUR)
        self.assertIsNone(decode_access_token(token, SECRET, ALGORITHM))

    def test_garbage_rejected(self):
        self.assertIsNone(decode_access_token("not.a.token", SECRET, ALGORITHM))
        self.assertIsNone(decode_access_token("", SECRET, ALGORITHM))


if __name__ == "__main__":
    unittest.main()
