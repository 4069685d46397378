"""Tests for AuthApiClient against a mocked transport."""

import json
import tempfile
import unittest
from pathlib import Path

import httpx

from client.api import ApiError, AuthApiClient
from client.session import SessionStore

BASE_URL = 'http://auth.test/api'
USER = {'id': 'u-1', 'name': 'Ana', 'email': 'ana@x.com'}


class TestAuthApiClient(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.session = SessionStore(Path(self.tmp.name) / 'session.json')
        self.requests: list[httpx.Request] = []

    def tearDown(self):
        self.tmp.cleanup()

    def _client(self, handler) -> AuthApiClient:
        def recording(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)
        return AuthApiClient(self.session, base_url=BASE_URL, transport=httpx.MockTransport(recording))

    def test_register_stores_token_and_name(self):
        def handler(request):
            self.assertEqual(request.url.path, '/api/auth/register')
            self.assertEqual(json.loads(request.content)['confirmPassword'], 'secret1')
            return httpx.Response(201, json={'success': True, 'message': 'ok', 'token': 'tok-1', 'user': USER})

        with self._client(handler) as client:
            client.register('Ana', 'ana@x.com', 'secret1', 'secret1')

        self.assertEqual(self.session.token, 'tok-1')
        self.assertEqual(self.session.user_name, 'Ana')

    def test_login_stores_token(self):
        handler = lambda request: httpx.Response(200, json={'success': True, 'token': 'tok-2', 'user': USER})

        with self._client(handler) as client:
            client.login('ana@x.com', 'secret1')

        self.assertEqual(self.session.token, 'tok-2')
        self.assertEqual(self.requests[0].url.path, '/api/auth/login')

    def test_bearer_header_attached_when_token_stored(self):
        self.session.save('tok-3', 'Ana')
        handler = lambda request: httpx.Response(200, json={'success': True, 'user': USER})

        with self._client(handler) as client:
            user = client.get_current_user()

        self.assertEqual(user, USER)
        self.assertEqual(self.requests[0].headers['Authorization'], 'Bearer tok-3')

    def test_no_header_without_token(self):
        handler = lambda request: httpx.Response(401, json={'success': False, 'message': 'No token provided. Please login first.'})

        with self._client(handler) as client:
            with self.assertRaises(ApiError) as ctx:
                client.get_current_user()

        self.assertNotIn('Authorization', self.requests[0].headers)
        self.assertEqual(ctx.exception.status_code, 401)
        self.assertEqual(ctx.exception.message, 'No token provided. Please login first.')

    def test_error_without_json_body(self):
        handler = lambda request: httpx.Response(502, text='Bad Gateway')

        with self._client(handler) as client:
            with self.assertRaises(ApiError) as ctx:
                client.login('ana@x.com', 'secret1')

        self.assertEqual(ctx.exception.status_code, 502)
        self.assertIsNone(self.session.token)

    def test_transport_failure_raises_api_error(self):
        def handler(request):
            raise httpx.ConnectError('refused', request=request)

        with self._client(handler) as client:
            with self.assertRaises(ApiError) as ctx:
                client.get_current_user()

        self.assertIsNone(ctx.exception.status_code)

    def test_current_user_rejects_reply_without_user(self):
        for reply in [
            httpx.Response(200),
            httpx.Response(200, json={'success': True}),
            httpx.Response(200, json={'success': True, 'user': None}),
            httpx.Response(200, json={'success': True, 'user': {'id': 'u-1'}}),
            httpx.Response(200, json=[USER]),
        ]:
            with self.subTest(body=reply.content):
                with self._client(lambda request, reply=reply: reply) as client:
                    with self.assertRaises(ApiError):
                        client.get_current_user()

    def test_login_with_null_user_still_stores_token(self):
        handler = lambda request: httpx.Response(200, json={'success': True, 'token': 'tok-5', 'user': None})

        with self._client(handler) as client:
            client.login('ana@x.com', 'secret1')

        self.assertEqual(self.session.token, 'tok-5')
        self.assertEqual(self.session.user_name, '')

    def test_logout_clears_session(self):
        self.session.save('tok-4', 'Ana')

        with self._client(lambda request: httpx.Response(200)) as client:
            client.logout()

        self.assertIsNone(self.session.token)


if __name__ == '__main__':
    unittest.main()
