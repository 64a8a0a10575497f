"""User model."""
import re
import uuid

from werkzeug.security import generate_password_hash, check_password_hash

from donation_site.extensions import db
from donation_site.utils import utcnow

ROLES = ('admin', 'user')
EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')
MIN_PASSWORD_LENGTH = 6
MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 254


def new_id():
    return uuid.uuid4().hex


class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    first_name = db.Column(db.String(MAX_NAME_LENGTH))
    email = db.Column(db.String(MAX_EMAIL_LENGTH), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)
    role = db.Column(db.String(20), nullable=False, default='user')  # admin, user
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    def set_password(self, password):
        """Store a salted hash; the plain password is never kept."""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        if not self.password_hash or password is None:
            return False
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f'<User {self.email} ({self.role})>'
