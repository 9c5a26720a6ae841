from dealmatch import db


class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), nullable=False, unique=True)
    password = db.Column(db.Text, nullable=False)
    user_type = db.Column(db.String(10), nullable=False)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    __table_args__ = (
        db.CheckConstraint("user_type IN ('buyer', 'seller')", name='ck_users_user_type'),
    )


class Profile(db.Model):
    __tablename__ = 'profiles'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True)
    investment_range = db.Column(db.String(100), nullable=True)
    experience_level = db.Column(db.String(100), nullable=True)
    preferred_industries = db.Column(db.JSON, nullable=True)
    timeline = db.Column(db.String(100), nullable=True)
    business_size = db.Column(db.String(100), nullable=True)
    location_preference = db.Column(db.String(100), nullable=True)
    liquid_capital = db.Column(db.String(100), nullable=True)
    risk_tolerance = db.Column(db.String(50), nullable=True)
    bio = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, server_default=db.func.now())


class Match(db.Model):
    __tablename__ = 'matches'

    id = db.Column(db.Integer, primary_key=True)
    seller_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    buyer_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    status = db.Column(db.String(10), nullable=False, default='pending')
    created_at = db.Column(db.DateTime, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, server_default=db.func.now())

    __table_args__ = (
        db.UniqueConstraint('seller_id', 'buyer_id', name='unique_match_pair'),
        db.CheckConstraint("status IN ('pending', 'accept', 'reject')", name='ck_matches_status'),
    )
