"""Application settings, selected by FLASK_ENV."""
import os
import re
from datetime import timedelta

_EXPIRATION_RE = re.compile(r'^\s*(\d+)\s*([smhd]?)\s*$')
_UNITS = {'': 'seconds', 's': 'seconds', 'm': 'minutes', 'h': 'hours', 'd': 'days'}


def parse_expiration(value):
    """Turn '2h', '30m', '45s', '1d' or '3600' into a timedelta."""
    if isinstance(value, timedelta):
        return value
    match = _EXPIRATION_RE.match(str(value))
    if not match:
        raise ValueError(f'Invalid token expiration: {value!r}')
    amount, unit = match.groups()
    return timedelta(**{_UNITS[unit]: int(amount)})


def _origins(value):
    return [origin.strip() for origin in value.split(',') if origin.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev_key_please_change')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///donations.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Token signing. The fallback secret is not secure and must be overridden.
    JWT_SECRET = os.environ.get('JWT_SECRET', 'fallbacksecret')
    JWT_EXPIRATION = os.environ.get('JWT_EXPIRATION', '2h')

    CORS_ORIGINS = _origins(os.environ.get('CORS_ORIGINS', 'https://www.konehs-foundation.org'))

    # Contact form relay
    MAIL_HOST = os.environ.get('MAIL_HOST', 'smtp.gmail.com')
    MAIL_PORT = int(os.environ.get('MAIL_PORT', 587))
    MAIL_USERNAME = os.environ.get('MAIL_USERNAME')
    MAIL_PASSWORD = os.environ.get('MAIL_PASSWORD')
    MAIL_USE_TLS = os.environ.get('MAIL_USE_TLS', 'true').lower() in ('1', 'true', 'yes')
    CONTACT_RECIPIENT = os.environ.get('CONTACT_RECIPIENT')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FORMAT = os.environ.get('LOG_FORMAT', '[%(asctime)s] %(levelname)s %(name)s: %(message)s')


class DevelopmentConfig(Config):
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    JWT_SECRET = 'test-jwt-secret'
    JWT_EXPIRATION = '2h'
    CORS_ORIGINS = ['http://localhost:3000']
    MAIL_USERNAME = 'mailer@example.org'
    MAIL_PASSWORD = 'mail-password'
    CONTACT_RECIPIENT = 'inbox@example.org'


class ProductionConfig(Config):
    DEBUG = False


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig,
}
