from flask import Blueprint, current_app, jsonify
from flask_jwt_extended import jwt_required
from sqlalchemy import JSON, DateTime, bindparam, text
from sqlalchemy.exc import SQLAlchemyError

from dealmatch import db
from dealmatch.auth import current_identity
from dealmatch.errors import NotFound
from dealmatch.schemas import ProfileRequest
from dealmatch.utils import get_json_body, row_to_dict

profile_bp = Blueprint('profile', __name__)

USER_EXISTS_QUERY = text("SELECT id FROM users WHERE id = :user_id")

VIEW_PROFILE_QUERY = text("""
    SELECT
        u.first_name,
        u.last_name,
        u.email,
        u.user_type,
        p.investment_range,
        p.experience_level,
        p.preferred_industries,
        p.timeline,
        p.business_size,
        p.location_preference,
        p.liquid_capital,
        p.risk_tolerance,
        p.bio,
        p.created_at,
        p.updated_at
    FROM users u
    LEFT JOIN profiles p ON u.id = p.user_id
    WHERE u.id = :user_id
""").columns(preferred_industries=JSON, created_at=DateTime, updated_at=DateTime)

# One statement keyed on the unique user_id, so concurrent saves cannot
# both insert.
UPSERT_PROFILE_QUERY = text("""
    INSERT INTO profiles (
        user_id,
        investment_range,
        experience_level,
        preferred_industries,
        timeline,
        business_size,
        location_preference,
        liquid_capital,
        risk_tolerance,
        bio
    ) VALUES (
        :user_id,
        :investment_range,
        :experience_level,
        :preferred_industries,
        :timeline,
        :business_size,
        :location_preference,
        :liquid_capital,
        :risk_tolerance,
        :bio
    )
    ON CONFLICT (user_id) DO UPDATE SET
        investment_range = excluded.investment_range,
        experience_level = excluded.experience_level,
        preferred_industries = excluded.preferred_industries,
        timeline = excluded.timeline,
        business_size = excluded.business_size,
        location_preference = excluded.location_preference,
        liquid_capital = excluded.liquid_capital,
        risk_tolerance = excluded.risk_tolerance,
        bio = excluded.bio,
        updated_at = CURRENT_TIMESTAMP
""").bindparams(bindparam('preferred_industries', type_=JSON))


def upsert_profile(user_id, profile):
    """Create or fully overwrite the profile of ``user_id``. The caller commits."""
    params = profile.to_row()
    params['user_id'] = user_id
    db.session.execute(UPSERT_PROFILE_QUERY, params)


@profile_bp.route('', methods=['GET'])
@jwt_required()
def view_profile():
    user_id, _ = current_identity()

    try:
        profile = db.session.execute(VIEW_PROFILE_QUERY, {'user_id': user_id}).fetchone()
    except SQLAlchemyError as e:
        current_app.logger.exception("Failed to fetch profile for user %s: %s", user_id, e)
        return jsonify({'error': 'Internal server error'}), 500

    if not profile:
        raise NotFound('User not found')

    return jsonify(row_to_dict(profile)), 200


@profile_bp.route('', methods=['POST'])
@jwt_required()
def save_profile():
    user_id, _ = current_identity()
    profile = ProfileRequest.model_validate(get_json_body())

    try:
        if not db.session.execute(USER_EXISTS_QUERY, {'user_id': user_id}).fetchone():
            raise NotFound('User not found')

        upsert_profile(user_id, profile)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception("Failed to save profile for user %s: %s", user_id, e)
        return jsonify({'error': 'Internal server error'}), 500

    current_app.logger.debug("Saved profile for user %s", user_id)
    return jsonify({'message': 'Profile saved successfully'}), 200
