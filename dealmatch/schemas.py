"""Request bodies accepted by the API.

One pydantic model per endpoint body. Keys arrive camelCase from the web
client and are exposed snake_case on the models; unknown keys are rejected.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

UserType = Literal['buyer', 'seller']
MatchAction = Literal['accept', 'reject']
RiskTolerance = Literal['conservative', 'moderate', 'aggressive', 'very-aggressive']

# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


class RequestModel(BaseModel):
    model_config = ConfigDict(extra='forbid', populate_by_name=True)


class RegisterRequest(RequestModel):
    email: EmailStr
    password: str = Field(min_length=1)
    user_type: UserType = Field(alias='userType')
    first_name: str = Field(alias='firstName', min_length=1, max_length=100)
    last_name: str = Field(alias='lastName', min_length=1, max_length=100)

    @field_validator('email')
    @classmethod
    def lowercase_email(cls, value):
        return value.lower()

    @field_validator('password')
    @classmethod
    def fits_bcrypt(cls, value):
        if len(value.encode('utf-8')) > MAX_PASSWORD_BYTES:
            raise ValueError(f'password must be at most {MAX_PASSWORD_BYTES} bytes')
        return value


class LoginRequest(RequestModel):
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)

    @field_validator('email')
    @classmethod
    def lowercase_email(cls, value):
        return value.lower()


class ProfileRequest(RequestModel):
    investment_range: Optional[str] = Field(None, alias='investmentRange', max_length=100)
    experience_level: Optional[str] = Field(None, alias='experienceLevel', max_length=100)
    preferred_industries: List[str] = Field(default_factory=list, alias='preferredIndustries', max_length=20)
    timeline: Optional[str] = Field(None, max_length=100)
    business_size: Optional[str] = Field(None, alias='businessSize', max_length=100)
    location_preference: Optional[str] = Field(None, alias='locationPreference', max_length=100)
    liquid_capital: Optional[str] = Field(None, alias='liquidCapital', max_length=100)
    risk_tolerance: Optional[RiskTolerance] = Field(None, alias='riskTolerance')
    bio: Optional[str] = Field(None, max_length=5000)

    @field_validator('risk_tolerance', mode='before')
    @classmethod
    def unset_select_is_none(cls, value):
        # The onboarding form posts '' for a select left on its placeholder
        return None if value == '' else value

    @field_validator('preferred_industries', mode='before')
    @classmethod
    def none_is_empty(cls, value):
        return [] if value is None else value

    @field_validator('preferred_industries')
    @classmethod
    def industries_not_blank(cls, value):
        if any(not industry.strip() for industry in value):
            raise ValueError('industries must be non-empty strings')
        return value

    def to_row(self):
        """Column values for the profiles table."""
        return self.model_dump(by_alias=False)


class MatchDecisionRequest(RequestModel):
    action: MatchAction
