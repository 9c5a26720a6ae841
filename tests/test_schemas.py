"""Request body models."""

import pytest
from pydantic import ValidationError

from dealmatch.schemas import LoginRequest, MatchDecisionRequest, ProfileRequest, RegisterRequest


class TestRegisterRequest:

    def test_aliases_map_to_columns(self):
        data = RegisterRequest.model_validate({
            'email': 'Jane@Example.com',
            'password': 'pw',
            'userType': 'buyer',
            'firstName': 'Jane',
            'lastName': 'Doe',
        })

        assert data.email == 'jane@example.com'
        assert data.user_type == 'buyer'
        assert data.first_name == 'Jane'

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            RegisterRequest.model_validate({
                'email': 'not-an-email',
                'password': 'pw',
                'userType': 'buyer',
                'firstName': 'Jane',
                'lastName': 'Doe',
            })

    def test_password_longer_than_bcrypt_accepts(self):
        with pytest.raises(ValidationError):
            RegisterRequest.model_validate({
                'email': 'jane@example.com',
                'password': 'x' * 73,
                'userType': 'buyer',
                'firstName': 'Jane',
                'lastName': 'Doe',
            })

    def test_blank_name(self):
        with pytest.raises(ValidationError):
            RegisterRequest.model_validate({
                'email': 'jane@example.com',
                'password': 'pw',
                'userType': 'seller',
                'firstName': '',
                'lastName': 'Doe',
            })


def test_login_lowercases_email():
    assert LoginRequest.model_validate({'email': 'BOB@EXAMPLE.COM', 'password': 'pw'}).email == 'bob@example.com'


class TestProfileRequest:

    def test_everything_is_optional(self):
        row = ProfileRequest.model_validate({}).to_row()

        assert row['preferred_industries'] == []
        assert row['bio'] is None
        assert set(row) == {
            'investment_range', 'experience_level', 'preferred_industries', 'timeline', 'business_size',
            'location_preference', 'liquid_capital', 'risk_tolerance', 'bio',
        }

    def test_blank_risk_tolerance_is_none(self):
        assert ProfileRequest.model_validate({'riskTolerance': ''}).risk_tolerance is None

    def test_null_industries_become_empty(self):
        assert ProfileRequest.model_validate({'preferredIndustries': None}).preferred_industries == []

    def test_blank_industry(self):
        with pytest.raises(ValidationError):
            ProfileRequest.model_validate({'preferredIndustries': ['retail', '  ']})

    def test_too_many_industries(self):
        with pytest.raises(ValidationError):
            ProfileRequest.model_validate({'preferredIndustries': [f'industry-{i}' for i in range(21)]})

    def test_bio_length(self):
        with pytest.raises(ValidationError):
            ProfileRequest.model_validate({'bio': 'x' * 5001})


@pytest.mark.parametrize('action', ['accept', 'reject'])
def test_valid_actions(action):
    assert MatchDecisionRequest.model_validate({'action': action}).action == action


@pytest.mark.parametrize('action', ['pending', 'ACCEPT', '', 1])
def test_invalid_actions(action):
    with pytest.raises(ValidationError):
        MatchDecisionRequest.model_validate({'action': action})
