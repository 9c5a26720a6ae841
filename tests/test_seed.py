"""The init-db and seed-db CLI commands."""

from dealmatch.seed import BUYERS, DEMO_PASSWORD, SELLERS
from tests.conftest import auth_headers


def test_init_db(app):
    result = app.test_cli_runner().invoke(args=['init-db'])

    assert result.exit_code == 0
    assert 'Database tables created.' in result.output


def test_seed_db_creates_demo_accounts(app, client):
    result = app.test_cli_runner().invoke(args=['seed-db'])

    assert result.exit_code == 0, result.output
    assert f'Created {len(BUYERS)} buyers and {len(SELLERS)} sellers' in result.output

    login = client.post('/api/auth/login', json={'email': SELLERS[0]['email'], 'password': DEMO_PASSWORD})
    assert login.status_code == 200
    buyers = client.get('/api/buyers', headers=auth_headers(login.get_json()['token'])).get_json()
    assert {b['email'] for b in buyers} == {entry['email'] for entry in BUYERS}


def test_seed_db_skips_existing_accounts(app):
    runner = app.test_cli_runner()
    runner.invoke(args=['seed-db'])

    result = runner.invoke(args=['seed-db'])

    assert result.exit_code == 0
    assert 'Created 0 buyers and 0 sellers' in result.output
