"""Sellers browsing buyer profiles."""

from tests.conftest import SAMPLE_PROFILE, auth_headers


def test_seller_sees_buyers_with_pending_status(client, buyer, seller):
    response = client.get('/api/buyers', headers=auth_headers(seller['token']))

    assert response.status_code == 200
    buyers = response.get_json()
    assert len(buyers) == 1
    listed = buyers[0]
    assert listed['id'] == buyer['user']['id']
    assert listed['email'] == 'buyer@example.com'
    assert listed['first_name'] == 'Bea'
    assert listed['preferred_industries'] == ['technology', 'healthcare']
    assert listed['status'] == 'pending'
    assert 'password' not in listed


def test_buyer_cannot_list_buyers(client, buyer):
    response = client.get('/api/buyers', headers=auth_headers(buyer['token']))

    assert response.status_code == 403
    assert response.get_json() == {'error': 'Only sellers can view buyer profiles'}


def test_listing_requires_a_token(client):
    response = client.get('/api/buyers')

    assert response.status_code == 401


def test_buyers_without_profile_and_sellers_are_hidden(client, register, seller):
    register('noprofile@example.com', user_type='buyer')
    other_seller = register('other-seller@example.com', user_type='seller')
    client.post('/api/profile', json=SAMPLE_PROFILE, headers=auth_headers(other_seller['token']))

    response = client.get('/api/buyers', headers=auth_headers(seller['token']))

    assert response.get_json() == []


def test_newest_profiles_come_first(client, register, seller):
    for email in ('first@example.com', 'second@example.com', 'third@example.com'):
        token = register(email, user_type='buyer')['token']
        client.post('/api/profile', json=SAMPLE_PROFILE, headers=auth_headers(token))

    buyers = client.get('/api/buyers', headers=auth_headers(seller['token'])).get_json()

    assert [b['email'] for b in buyers] == ['third@example.com', 'second@example.com', 'first@example.com']


def test_status_reflects_only_the_calling_seller(client, register, buyer, seller):
    other_seller = register('rival@example.com', user_type='seller')
    client.post(f"/api/matches/{buyer['user']['id']}", json={'action': 'reject'},
                headers=auth_headers(other_seller['token']))
    client.post(f"/api/matches/{buyer['user']['id']}", json={'action': 'accept'},
                headers=auth_headers(seller['token']))

    mine = client.get('/api/buyers', headers=auth_headers(seller['token'])).get_json()
    theirs = client.get('/api/buyers', headers=auth_headers(other_seller['token'])).get_json()

    assert mine[0]['status'] == 'accept'
    assert theirs[0]['status'] == 'reject'


def test_database_failure_is_logged_with_traceback(client, seller, monkeypatch, caplog):
    from sqlalchemy.exc import OperationalError

    from dealmatch import db

    def database_down(*args, **kwargs):
        raise OperationalError('SELECT', {}, Exception('connection refused'))

    monkeypatch.setattr(db.session, 'execute', database_down)

    response = client.get('/api/buyers', headers=auth_headers(seller['token']))

    assert response.status_code == 500
    assert response.get_json() == {'error': 'Internal server error'}
    failures = [record for record in caplog.records if record.levelname == 'ERROR']
    assert failures
    assert failures[0].exc_info is not None
