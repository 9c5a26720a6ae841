"""Shared fixtures: an app on in-memory SQLite and helpers to create users."""

import pytest

from dealmatch import create_app, db


@pytest.fixture
def app():
    app = create_app('dealmatch.config.TestConfig')
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def auth_headers(token):
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def register(client):
    """Register a user and return the response body (user + token)."""

    def _register(email, password='secret1', user_type='buyer', first_name='Test', last_name='User'):
        response = client.post('/api/auth/register', json={
            'email': email,
            'password': password,
            'userType': user_type,
            'firstName': first_name,
            'lastName': last_name,
        })
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return _register


SAMPLE_PROFILE = {
    'investmentRange': '1m-5m',
    'experienceLevel': 'experienced',
    'preferredIndustries': ['technology', 'healthcare'],
    'timeline': 'medium-term',
    'businessSize': 'small',
    'locationPreference': 'national',
    'liquidCapital': '1m-5m',
    'riskTolerance': 'moderate',
    'bio': 'Operator looking for a profitable software business.',
}


@pytest.fixture
def buyer(register, client):
    """A buyer with a saved profile."""
    body = register('buyer@example.com', user_type='buyer', first_name='Bea', last_name='Buyer')
    response = client.post('/api/profile', json=SAMPLE_PROFILE, headers=auth_headers(body['token']))
    assert response.status_code == 200
    return body


@pytest.fixture
def seller(register):
    return register('seller@example.com', user_type='seller', first_name='Sam', last_name='Seller')
