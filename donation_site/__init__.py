"""
Donation site - Application Factory
"""
import os

import click
from dotenv import load_dotenv
from flask import Flask

from config.settings import config, parse_expiration
from donation_site.extensions import db, cors
from donation_site.logging_config import init_app_logging
from donation_site.routes import register_blueprints
from donation_site.services.auth import AuthService

INSECURE_SECRETS = ('fallbacksecret', 'myfallbacksecret')


def create_app(config_name=None):
    """Application Factory."""
    load_dotenv()

    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config.get(config_name, config['default']))

    logger = init_app_logging(app)

    # Initialize extensions
    db.init_app(app)
    cors.init_app(
        app,
        resources={r'/graphql': {}, r'/api/*': {}},
        origins=app.config['CORS_ORIGINS'],
        methods=['GET', 'POST', 'OPTIONS'],
        allow_headers=['Content-Type', 'Authorization'],
        supports_credentials=True,
    )

    if app.config['JWT_SECRET'] in INSECURE_SECRETS and not app.testing:
        logger.warning("JWT_SECRET is the insecure default; set it before deploying")
    app.extensions['auth_service'] = AuthService(
        secret=app.config['JWT_SECRET'],
        expires_in=parse_expiration(app.config['JWT_EXPIRATION']),
    )

    # Register blueprints
    register_blueprints(app)

    # CLI Commands
    register_cli_commands(app)

    return app


def register_cli_commands(app):
    """Register CLI commands."""

    @app.cli.command("init-db")
    def init_db_command():
        """Creates database tables."""
        db.create_all()
        click.echo("Initialized the database.")
