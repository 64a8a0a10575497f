"""
Test configuration and fixtures
"""
import pytest

from donation_site import create_app
from donation_site.extensions import db as _db
from donation_site.services.accounts import AccountService
from donation_site.services.donations import DonationLedger


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_service(app):
    return app.extensions['auth_service']


@pytest.fixture
def accounts(app, auth_service):
    return AccountService(_db.session, auth_service)


@pytest.fixture
def ledger(app):
    return DonationLedger(_db.session)


@pytest.fixture
def admin(accounts):
    """Registered admin: (token, user)"""
    return accounts.register('Admin', 'admin@x.com', 'secret1', 'admin')


@pytest.fixture
def member(accounts):
    """Registered regular user: (token, user)"""
    return accounts.register('Abel', 'a@x.com', 'secret1')


@pytest.fixture
def graphql(client):
    """POST a GraphQL document, optionally with a bearer token; returns (status, body)"""
    def run(query, variables=None, token=None):
        headers = {}
        if token:
            headers['Authorization'] = f'Bearer {token}'
        response = client.post(
            '/graphql',
            json={'query': query, 'variables': variables or {}},
            headers=headers,
        )
        return response.status_code, response.get_json()
    return run
