from flask import Blueprint, current_app, jsonify
from sqlalchemy import JSON, DateTime, text
from sqlalchemy.exc import SQLAlchemyError

from dealmatch import db
from dealmatch.auth import current_identity, role_required
from dealmatch.utils import row_to_dict

buyer_bp = Blueprint('buyers', __name__)

# Every buyer with a profile, tagged with this seller's decision on them.
BUYERS_FOR_SELLER_QUERY = text("""
    SELECT
        u.id,
        u.first_name,
        u.last_name,
        u.email,
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
        p.updated_at,
        COALESCE(m.status, 'pending') AS status
    FROM users u
    JOIN profiles p ON u.id = p.user_id
    LEFT JOIN matches m ON u.id = m.buyer_id AND m.seller_id = :seller_id
    WHERE u.user_type = 'buyer'
    ORDER BY p.created_at DESC, p.id DESC
""").columns(preferred_industries=JSON, created_at=DateTime, updated_at=DateTime)


@buyer_bp.route('', methods=['GET'])
@role_required('seller', 'Only sellers can view buyer profiles')
def list_buyers():
    seller_id, _ = current_identity()

    try:
        buyers = db.session.execute(BUYERS_FOR_SELLER_QUERY, {'seller_id': seller_id}).fetchall()
    except SQLAlchemyError as e:
        current_app.logger.exception("Failed to fetch buyers for seller %s: %s", seller_id, e)
        return jsonify({'error': 'Internal server error'}), 500

    current_app.logger.debug("Retrieved %d buyer profiles for seller %s", len(buyers), seller_id)
    return jsonify([row_to_dict(buyer) for buyer in buyers]), 200
