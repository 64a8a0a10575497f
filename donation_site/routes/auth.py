"""Bearer-token identity for every request."""
from flask import Blueprint, current_app, g, request

auth_bp = Blueprint('auth', __name__)


@auth_bp.before_app_request
def load_identity():
    """Attach the caller's Identity (or None) to ``g``; never rejects the request."""
    auth = current_app.extensions['auth_service']
    g.identity = auth.identity_from_header(request.headers.get('Authorization'))
