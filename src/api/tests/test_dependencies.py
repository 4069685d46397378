"""Unit tests for API dependency wiring.

Tests focus on:
- InternalError (500) when MongoDB client is None
- Correct database name is used
- Settings flow into the hasher and token signer
"""

import unittest
from datetime import timedelta
from unittest.mock import patch, MagicMock

from adapter.mongodb.user_repository import MongoUserRepository
from adapter.security.bcrypt_hasher import BcryptPasswordHasher
from adapter.security.jose_signer import JoseTokenSigner
from api.config import Settings
from api.dependencies import get_auth_service, get_password_hasher, get_token_signer, get_user_repo
from domain.model.errors import InternalError
from services.auth_service import AuthService

SETTINGS = Settings(
    mongo_url='mongodb://localhost:27017',
    database_name='auth_test',
    jwt_secret_key='dep-secret',
    jwt_expiration_days=3,
    bcrypt_rounds=5,
)


class TestGetUserRepo(unittest.TestCase):

    @patch('api.dependencies.get_mongodb_client')
    def test_returns_mongo_repository_when_connected(self, mock_get_client):
        mock_client = MagicMock()
        mock_get_client.return_value = mock_client

        repo = get_user_repo(SETTINGS)

        self.assertIsInstance(repo, MongoUserRepository)
        mock_get_client.assert_called_once_with('mongodb://localhost:27017')
        mock_client.__getitem__.assert_called_with('auth_test')

    @patch('api.dependencies.get_mongodb_client')
    def test_raises_internal_error_when_mongodb_unavailable(self, mock_get_client):
        mock_get_client.return_value = None

        with self.assertRaises(InternalError) as context:
            get_user_repo(SETTINGS)

        self.assertEqual(context.exception.message, "Database unavailable")
        self.assertEqual(context.exception.error, "ServiceUnavailable")


class TestSecurityDependencies(unittest.TestCase):

    def test_hasher_uses_configured_rounds(self):
        hasher = get_password_hasher(SETTINGS)

        self.assertIsInstance(hasher, BcryptPasswordHasher)
        self.assertEqual(hasher.rounds, 5)

    def test_signer_uses_configured_expiry(self):
        signer = get_token_signer(SETTINGS)

        self.assertIsInstance(signer, JoseTokenSigner)
        self.assertEqual(signer.expires_in, timedelta(days=3))
        self.assertEqual(signer.verify(signer.issue('user-1')), 'user-1')

    def test_auth_service_wires_collaborators(self):
        repo, hasher, signer = MagicMock(), MagicMock(), MagicMock()

        service = get_auth_service(repo=repo, hasher=hasher, tokens=signer)

        self.assertIsInstance(service, AuthService)
        self.assertIs(service.repo, repo)
        self.assertIs(service.hasher, hasher)
        self.assertIs(service.tokens, signer)


if __name__ == '__main__':
    unittest.main()
