"""Unit tests for JoseTokenSigner."""

import unittest
from datetime import datetime, timedelta, timezone

from jose import jwt

from adapter.security.jose_signer import JWT_ALGORITHM, JoseTokenSigner
from domain.model.errors import ExpiredTokenError, InvalidTokenError

SECRET = 'unit-test-secret'


def _clock_at(moment: datetime):
    return lambda: moment


class TestJoseTokenSigner(unittest.TestCase):

    def setUp(self):
        self.signer = JoseTokenSigner(SECRET)

    def test_verify_returns_issued_user_id(self):
        token = self.signer.issue('user-123')
        self.assertEqual(self.signer.verify(token), 'user-123')

    def test_token_carries_user_id_and_seven_day_expiry(self):
        issued_at = datetime.now(timezone.utc).replace(microsecond=0)
        signer = JoseTokenSigner(SECRET, clock=_clock_at(issued_at))

        claims = jwt.decode(signer.issue('user-123'), SECRET, algorithms=[JWT_ALGORITHM])

        self.assertEqual(claims['userId'], 'user-123')
        self.assertEqual(claims['iat'], int(issued_at.timestamp()))
        self.assertEqual(claims['exp'] - claims['iat'], int(timedelta(days=7).total_seconds()))

    def test_token_is_url_safe(self):
        token = self.signer.issue('user-123')
        self.assertRegex(token, r'^[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]+$')

    def test_token_still_valid_before_expiry(self):
        issued_at = datetime.now(timezone.utc) - timedelta(days=6, hours=23)
        token = JoseTokenSigner(SECRET, clock=_clock_at(issued_at)).issue('user-123')
        self.assertEqual(self.signer.verify(token), 'user-123')

    def test_expired_token_raises_expired(self):
        issued_at = datetime.now(timezone.utc) - timedelta(days=7, minutes=1)
        token = JoseTokenSigner(SECRET, clock=_clock_at(issued_at)).issue('user-123')

        with self.assertRaises(ExpiredTokenError):
            self.signer.verify(token)

    def test_token_from_other_secret_is_invalid(self):
        token = JoseTokenSigner('another-secret').issue('user-123')

        with self.assertRaises(InvalidTokenError):
            self.signer.verify(token)

    def test_tampered_payload_is_invalid(self):
        header, _, signature = self.signer.issue('user-123').split('.')
        forged_payload = JoseTokenSigner(SECRET).issue('admin').split('.')[1]

        with self.assertRaises(InvalidTokenError):
            self.signer.verify(f'{header}.{forged_payload}.{signature}')

    def test_garbage_token_is_invalid(self):
        with self.assertRaises(InvalidTokenError):
            self.signer.verify('not-a-token')

    def test_missing_user_id_claim_is_invalid(self):
        exp = datetime.now(timezone.utc) + timedelta(days=1)
        token = jwt.encode({'sub': 'user-123', 'exp': exp}, SECRET, algorithm=JWT_ALGORITHM)

        with self.assertRaises(InvalidTokenError):
            self.signer.verify(token)

    def test_non_string_user_id_is_invalid(self):
        exp = datetime.now(timezone.utc) + timedelta(days=1)
        token = jwt.encode({'userId': 42, 'exp': exp}, SECRET, algorithm=JWT_ALGORITHM)

        with self.assertRaises(InvalidTokenError):
            self.signer.verify(token)

    def test_empty_secret_rejected(self):
        with self.assertRaises(ValueError):
            JoseTokenSigner('')


if __name__ == '__main__':
    unittest.main()
