"""
Unit tests for token signing and verification
"""
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from donation_site.services.auth import AuthService, Identity


class FakeUser:
    id = 'abc123'
    first_name = 'Abel'
    email = 'a@x.com'
    role = 'user'


@pytest.fixture
def service():
    return AuthService(secret='unit-test-secret', expires_in=timedelta(hours=2))


class TestSignToken:
    """Test token contents"""

    def test_claims_carry_identity_and_role(self, service):
        token = service.sign_token(FakeUser())
        claims = jwt.decode(token, 'unit-test-secret', algorithms=['HS256'])

        assert claims['sub'] == 'abc123'
        assert claims['firstName'] == 'Abel'
        assert claims['email'] == 'a@x.com'
        assert claims['role'] == 'user'

    def test_expiry_follows_configured_window(self, service):
        issued = datetime(2030, 1, 1, tzinfo=timezone.utc)
        token = service.sign_token(FakeUser(), now=issued)
        claims = jwt.get_unverified_claims(token)

        assert claims['exp'] - claims['iat'] == 2 * 60 * 60

    def test_requires_secret(self):
        with pytest.raises(ValueError):
            AuthService(secret='', expires_in=timedelta(hours=1))


class TestVerifyToken:
    """Verification yields an Identity or None, never an exception"""

    def test_valid_token(self, service):
        identity = service.verify_token(service.sign_token(FakeUser()))

        assert identity == Identity(user_id='abc123', email='a@x.com', role='user', first_name='Abel')
        assert identity.is_admin is False

    def test_expired_token_is_anonymous(self, service):
        long_ago = datetime.now(timezone.utc) - timedelta(days=1)
        token = service.sign_token(FakeUser(), now=long_ago)

        assert service.verify_token(token) is None

    def test_wrong_secret_is_anonymous(self, service):
        other = AuthService(secret='someone-else', expires_in=timedelta(hours=2))
        token = other.sign_token(FakeUser())

        assert service.verify_token(token) is None

    @pytest.mark.parametrize('token', [None, '', 'not-a-jwt', 'a.b.c'])
    def test_malformed_token_is_anonymous(self, service, token):
        assert service.verify_token(token) is None

    def test_token_without_identity_claims_is_anonymous(self, service):
        token = jwt.encode({'foo': 'bar'}, 'unit-test-secret', algorithm='HS256')

        assert service.verify_token(token) is None


class TestIdentityFromHeader:
    def test_bearer_header(self, service):
        token = service.sign_token(FakeUser())

        identity = service.identity_from_header(f'Bearer {token}')

        assert identity.user_id == 'abc123'

    @pytest.mark.parametrize('header', [None, '', 'Basic dXNlcjpwYXNz', 'Bearer', 'Bearer garbage'])
    def test_missing_or_bad_header(self, service, header):
        assert service.identity_from_header(header) is None
