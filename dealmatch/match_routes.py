from flask import Blueprint, current_app, jsonify
from flask_jwt_extended import jwt_required
from pydantic import ValidationError
from sqlalchemy import JSON, DateTime, text
from sqlalchemy.exc import SQLAlchemyError

from dealmatch import db
from dealmatch.auth import current_identity, role_required
from dealmatch.errors import InvalidArgument, NotFound
from dealmatch.schemas import MatchDecisionRequest
from dealmatch.utils import get_json_body, row_to_dict

match_bp = Blueprint('match', __name__)

BUYER_EXISTS_QUERY = text("SELECT id FROM users WHERE id = :buyer_id AND user_type = 'buyer'")

# Status is a flat field: any decision overwrites the previous one.
UPSERT_MATCH_QUERY = text("""
    INSERT INTO matches (seller_id, buyer_id, status)
    VALUES (:seller_id, :buyer_id, :status)
    ON CONFLICT (seller_id, buyer_id) DO UPDATE SET
        status = excluded.status,
        updated_at = CURRENT_TIMESTAMP
""")

SELLER_MATCHES_QUERY = text("""
    SELECT
        m.id,
        m.buyer_id,
        m.status,
        m.created_at,
        m.updated_at,
        u.first_name,
        u.last_name,
        u.email,
        p.investment_range,
        p.experience_level,
        p.preferred_industries
    FROM matches m
    JOIN users u ON m.buyer_id = u.id
    LEFT JOIN profiles p ON u.id = p.user_id
    WHERE m.seller_id = :user_id
    ORDER BY m.created_at DESC, m.id DESC
""").columns(preferred_industries=JSON, created_at=DateTime, updated_at=DateTime)

BUYER_MATCHES_QUERY = text("""
    SELECT
        m.id,
        m.seller_id,
        m.status,
        m.created_at,
        m.updated_at,
        u.first_name,
        u.last_name,
        u.email
    FROM matches m
    JOIN users u ON m.seller_id = u.id
    WHERE m.buyer_id = :user_id
    ORDER BY m.created_at DESC, m.id DESC
""").columns(created_at=DateTime, updated_at=DateTime)


def record_decision(seller_id, buyer_id, action):
    """Upsert the (seller, buyer) match with ``action`` as its status. The caller commits."""
    db.session.execute(UPSERT_MATCH_QUERY, {'seller_id': seller_id, 'buyer_id': buyer_id, 'status': action})


@match_bp.route('/<int:buyer_id>', methods=['POST'])
@role_required('seller', 'Only sellers can accept/reject buyers')
def decide(buyer_id):
    """
    Accept or reject a buyer on behalf of the calling seller.
    Repeating a decision, or flipping it, updates the same row.
    """
    seller_id, _ = current_identity()

    try:
        action = MatchDecisionRequest.model_validate(get_json_body()).action
    except (ValidationError, InvalidArgument):
        raise InvalidArgument('Invalid action')

    try:
        if not db.session.execute(BUYER_EXISTS_QUERY, {'buyer_id': buyer_id}).fetchone():
            raise NotFound('Buyer not found')

        record_decision(seller_id, buyer_id, action)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception("Failed to record %s of buyer %s by seller %s: %s", action, buyer_id, seller_id, e)
        return jsonify({'error': 'Internal server error'}), 500

    current_app.logger.info("Seller %s %sed buyer %s", seller_id, action, buyer_id)
    return jsonify({'message': f'Buyer {action}ed successfully'}), 200


@match_bp.route('', methods=['GET'])
@jwt_required()
def get_matches():
    """
    Sellers see the buyers they decided on, with a profile summary.
    Buyers see the sellers who decided on them.
    """
    user_id, user_type = current_identity()
    query = SELLER_MATCHES_QUERY if user_type == 'seller' else BUYER_MATCHES_QUERY

    try:
        matches = db.session.execute(query, {'user_id': user_id}).fetchall()
    except SQLAlchemyError as e:
        current_app.logger.exception("Failed to fetch matches for user %s: %s", user_id, e)
        return jsonify({'error': 'Internal server error'}), 500

    current_app.logger.debug("Retrieved %d matches for %s %s", len(matches), user_type, user_id)
    return jsonify([row_to_dict(match) for match in matches]), 200
