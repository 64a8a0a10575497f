"""Account operations: register, login and the caller's own record."""
import logging

from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash

from donation_site.errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    UnauthorizedError,
    ValidationError,
)
from donation_site.models.user import (
    User,
    ROLES,
    EMAIL_PATTERN,
    MAX_EMAIL_LENGTH,
    MAX_NAME_LENGTH,
    MIN_PASSWORD_LENGTH,
)

logger = logging.getLogger(__name__)

# Checked against when the email is unknown so both failures cost one hash
_DUMMY_HASH = generate_password_hash('not-a-real-password')


def normalize_email(email):
    return (email or '').strip().lower()


def validate_registration(first_name, email, password, role):
    """Return the cleaned (first_name, email, role) or raise ValidationError."""
    first_name = (first_name or '').strip()
    email = normalize_email(email)
    role = role or 'user'

    if not first_name:
        raise ValidationError('First name is required')
    if len(first_name) > MAX_NAME_LENGTH:
        raise ValidationError(f'First name must be at most {MAX_NAME_LENGTH} characters')
    if len(email) > MAX_EMAIL_LENGTH:
        raise ValidationError(f'Email must be at most {MAX_EMAIL_LENGTH} characters')
    if not EMAIL_PATTERN.match(email):
        raise ValidationError('Please fill a valid email address')
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters')
    if role not in ROLES:
        raise ValidationError(f'Role must be one of: {", ".join(ROLES)}')
    return first_name, email, role


class AccountService:
    """Registers users and checks credentials against the record store."""

    def __init__(self, session, auth):
        self.session = session
        self.auth = auth

    def find_by_email(self, email):
        return self.session.query(User).filter_by(email=normalize_email(email)).first()

    def register(self, first_name, email, password, role=None):
        """Create a user and return (token, user).

        Any caller may ask for the admin role; nothing gates it.
        """
        first_name, email, role = validate_registration(first_name, email, password, role)

        if self.find_by_email(email) is not None:
            raise DuplicateEmailError()

        user = User(first_name=first_name, email=email, role=role)
        user.set_password(password)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            self.session.rollback()
            raise DuplicateEmailError()

        logger.info(f"Registered {user.email} as {user.role}")
        return self.auth.sign_token(user), user

    def login(self, email, password):
        """Return (token, user) for matching credentials."""
        user = self.find_by_email(email)
        if user is None:
            check_password_hash(_DUMMY_HASH, password or '')
        if user is None or not user.check_password(password):
            logger.info(f"Failed login for {normalize_email(email)}")
            raise InvalidCredentialsError()
        return self.auth.sign_token(user), user

    def get_me(self, identity):
        if identity is None:
            raise UnauthorizedError('Not authenticated')
        return self.session.get(User, identity.user_id)
