"""Flask CLI commands for creating and seeding the database.

    flask --app run init-db
    flask --app run seed-db
"""
import click

from dealmatch import db
from dealmatch.auth_routes import create_user, find_user_by_email
from dealmatch.profile_routes import upsert_profile
from dealmatch.schemas import ProfileRequest

DEMO_PASSWORD = 'password123'

BUYERS = [
    {
        'email': 'john.smith@example.com',
        'firstName': 'John',
        'lastName': 'Smith',
        'profile': {
            'investmentRange': '1m-5m',
            'experienceLevel': 'intermediate',
            'preferredIndustries': ['technology', 'healthcare'],
            'timeline': '6-12 months',
            'businessSize': '10-50 employees',
            'locationPreference': 'United States',
            'liquidCapital': '2m-5m',
            'riskTolerance': 'moderate',
            'bio': 'Experienced entrepreneur looking to acquire a technology or healthcare business '
                   'with strong growth potential.',
        },
    },
    {
        'email': 'sarah.johnson@example.com',
        'firstName': 'Sarah',
        'lastName': 'Johnson',
        'profile': {
            'investmentRange': '500k-1m',
            'experienceLevel': 'beginner',
            'preferredIndustries': ['retail', 'food'],
            'timeline': '3-6 months',
            'businessSize': '5-20 employees',
            'locationPreference': 'California',
            'liquidCapital': '500k-1m',
            'riskTolerance': 'conservative',
            'bio': 'First-time buyer seeking a stable retail or food business with established customer base.',
        },
    },
    {
        'email': 'michael.chen@example.com',
        'firstName': 'Michael',
        'lastName': 'Chen',
        'profile': {
            'investmentRange': '5m-10m',
            'experienceLevel': 'advanced',
            'preferredIndustries': ['manufacturing', 'logistics'],
            'timeline': '12-18 months',
            'businessSize': '50-200 employees',
            'locationPreference': 'Texas',
            'liquidCapital': '5m-10m',
            'riskTolerance': 'aggressive',
            'bio': 'Serial entrepreneur with 15+ years experience in manufacturing. Looking for scalable operations.',
        },
    },
    {
        'email': 'emily.davis@example.com',
        'firstName': 'Emily',
        'lastName': 'Davis',
        'profile': {
            'investmentRange': '100k-500k',
            'experienceLevel': 'beginner',
            'preferredIndustries': ['services', 'consulting'],
            'timeline': '3-6 months',
            'businessSize': '1-10 employees',
            'locationPreference': 'New York',
            'liquidCapital': '200k-500k',
            'riskTolerance': 'moderate',
            'bio': 'Marketing professional looking to acquire a service-based business to leverage my expertise.',
        },
    },
    {
        'email': 'david.wilson@example.com',
        'firstName': 'David',
        'lastName': 'Wilson',
        'profile': {
            'investmentRange': '10m+',
            'experienceLevel': 'advanced',
            'preferredIndustries': ['finance', 'real-estate'],
            'timeline': '6-12 months',
            'businessSize': '200+ employees',
            'locationPreference': 'Florida',
            'liquidCapital': '10m+',
            'riskTolerance': 'aggressive',
            'bio': 'Private equity investor seeking large-scale opportunities in finance or real estate sectors.',
        },
    },
]

SELLERS = [
    {
        'email': 'robert.brown@techstartup.com',
        'firstName': 'Robert',
        'lastName': 'Brown',
        'profile': {
            'investmentRange': '2m-3m',
            'experienceLevel': '5 years',
            'preferredIndustries': ['technology'],
            'timeline': '3-6 months',
            'businessSize': '15 employees',
            'locationPreference': 'Silicon Valley',
            'liquidCapital': '500k-1m',
            'riskTolerance': 'moderate',
            'bio': 'SaaS startup with $2M ARR, 40% YoY growth. Looking for strategic buyer to scale operations.',
        },
    },
    {
        'email': 'lisa.garcia@restaurant.com',
        'firstName': 'Lisa',
        'lastName': 'Garcia',
        'profile': {
            'investmentRange': '800k-1.2m',
            'experienceLevel': '8 years',
            'preferredIndustries': ['food'],
            'timeline': '6-12 months',
            'businessSize': '25 employees',
            'locationPreference': 'Los Angeles',
            'liquidCapital': '200k-500k',
            'riskTolerance': 'conservative',
            'bio': 'Popular restaurant chain with 3 locations, $1.5M annual revenue. Family-owned for 8 years.',
        },
    },
    {
        'email': 'james.miller@manufacturing.com',
        'firstName': 'James',
        'lastName': 'Miller',
        'profile': {
            'investmentRange': '8m-12m',
            'experienceLevel': '20 years',
            'preferredIndustries': ['manufacturing'],
            'timeline': '12-18 months',
            'businessSize': '150 employees',
            'locationPreference': 'Michigan',
            'liquidCapital': '2m-5m',
            'riskTolerance': 'moderate',
            'bio': 'Automotive parts manufacturer with $15M revenue, established contracts with major OEMs.',
        },
    },
    {
        'email': 'anna.rodriguez@consulting.com',
        'firstName': 'Anna',
        'lastName': 'Rodriguez',
        'profile': {
            'investmentRange': '300k-500k',
            'experienceLevel': '6 years',
            'preferredIndustries': ['consulting'],
            'timeline': '3-6 months',
            'businessSize': '8 employees',
            'locationPreference': 'Chicago',
            'liquidCapital': '100k-300k',
            'riskTolerance': 'conservative',
            'bio': 'Management consulting firm specializing in healthcare. $800K annual revenue, 95% client retention.',
        },
    },
    {
        'email': 'thomas.lee@retail.com',
        'firstName': 'Thomas',
        'lastName': 'Lee',
        'profile': {
            'investmentRange': '1.5m-2.5m',
            'experienceLevel': '12 years',
            'preferredIndustries': ['retail'],
            'timeline': '6-12 months',
            'businessSize': '45 employees',
            'locationPreference': 'Seattle',
            'liquidCapital': '500k-1m',
            'riskTolerance': 'moderate',
            'bio': 'Specialty retail chain with 5 locations, $4M annual revenue. Strong e-commerce presence.',
        },
    },
]


def seed_users(entries, user_type):
    """Insert demo users of one type with their profiles. Returns the emails that were created."""
    created = []
    for entry in entries:
        if find_user_by_email(entry['email']):
            continue
        user = create_user(entry['email'], DEMO_PASSWORD, user_type, entry['firstName'], entry['lastName'])
        upsert_profile(user.id, ProfileRequest.model_validate(entry['profile']))
        created.append(entry['email'])
    return created


def register_commands(app):
    @app.cli.command('init-db')
    def init_db():
        """Create all tables."""
        db.create_all()
        click.echo('Database tables created.')

    @app.cli.command('seed-db')
    def seed_db():
        """Insert demo buyers and sellers."""
        db.create_all()
        try:
            buyers = seed_users(BUYERS, 'buyer')
            sellers = seed_users(SELLERS, 'seller')
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        click.echo(f'Created {len(buyers)} buyers and {len(sellers)} sellers')
        click.echo('\n=== Login Credentials ===')
        for label, entries in (('Buyers', BUYERS), ('Sellers', SELLERS)):
            click.echo(f'{label}:')
            for entry in entries:
                click.echo(f"{entry['firstName']} {entry['lastName']}: {entry['email']} / {DEMO_PASSWORD}")
