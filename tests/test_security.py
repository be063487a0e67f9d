import unittest
from datetime import date, datetime, timedelta, timezone

import jwt

from fittrack.config import Settings
from fittrack.models.base import new_object_id, is_object_id, utcnow
from fittrack.models.goal import FitnessGoal
from fittrack.models.progress import ProgressEntry
from fittrack.security import (
    USER_ROLE,
    TRAINER_ROLE,
    TokenError,
    TokenExpired,
    hash_password,
    verify_password,
    create_access_token,
    decode_access_token,
)
from tests.base import TEST_SECRET


class PasswordTest(unittest.TestCase):
    def test_hash_is_salted_and_verifiable(self) -> None:
        first = hash_password("password123")
        second = hash_password("password123")
        self.assertNotEqual(first, "password123")
        self.assertNotEqual(first, second)
        self.assertTrue(verify_password("password123", first))
        self.assertFalse(verify_password("incorrectpassword", first))


class TokenTest(unittest.TestCase):
    def setUp(self) -> None:
        self.settings = Settings(SECRET_KEY=TEST_SECRET, ACCESS_TOKEN_EXPIRE_MINUTES=15)

    def test_round_trip(self) -> None:
        token = create_access_token("60c72b2f5f1b2c001f58eb1e", TRAINER_ROLE, self.settings)
        data = decode_access_token(token, self.settings)
        self.assertEqual(data.subject, "60c72b2f5f1b2c001f58eb1e")
        self.assertEqual(data.role, TRAINER_ROLE)

    def test_expiry_uses_configured_lifetime(self) -> None:
        token = create_access_token("abc", USER_ROLE, self.settings)
        payload = jwt.decode(token, TEST_SECRET, algorithms=["HS256"])
        self.assertEqual(payload["exp"] - payload["iat"], 15 * 60)

    def test_expired(self) -> None:
        token = create_access_token(
            "abc", USER_ROLE, self.settings, expires_delta=timedelta(seconds=-1)
        )
        with self.assertRaises(TokenExpired):
            decode_access_token(token, self.settings)

    def test_unknown_role(self) -> None:
        token = jwt.encode(
            {"sub": "abc", "role": "admin",
             "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
            TEST_SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(TokenError):
            decode_access_token(token, self.settings)

    def test_missing_expiry(self) -> None:
        token = jwt.encode({"sub": "abc", "role": USER_ROLE}, TEST_SECRET, algorithm="HS256")
        with self.assertRaises(TokenError):
            decode_access_token(token, self.settings)


class ObjectIdTest(unittest.TestCase):
    def test_new_ids_are_well_formed(self) -> None:
        ids = {new_object_id() for _ in range(50)}
        self.assertEqual(len(ids), 50)
        self.assertTrue(all(is_object_id(value) for value in ids))

    def test_malformed(self) -> None:
        for value in ("", "123", "g" * 24, "A" * 24, None, 60):
            with self.subTest(value=value):
                self.assertFalse(is_object_id(value))


class TimestampTest(unittest.TestCase):
    def test_utcnow_is_timezone_aware(self) -> None:
        now = utcnow()
        self.assertIsNotNone(now.tzinfo)
        self.assertEqual(now.utcoffset(), timedelta(0))
        self.assertLess(abs(now - datetime.now(timezone.utc)), timedelta(seconds=5))

    def test_model_defaults_are_timezone_aware(self) -> None:
        goal = FitnessGoal(user_id="u", goal_type="Strength", target=1, timeline="1 week")
        entry = ProgressEntry(user_id="u", date=date(2025, 1, 9), weight=70)
        for value in (goal.created_at, goal.updated_at, entry.created_at):
            self.assertIsNotNone(value.tzinfo)


if __name__ == "__main__":
    unittest.main()
