"""Routes package - Blueprint registration."""
from donation_site.routes.auth import auth_bp
from donation_site.routes.api import api_bp
from donation_site.routes.contact import contact_bp


def register_blueprints(app):
    """Register all blueprints with the Flask app."""
    app.register_blueprint(auth_bp)
    app.register_blueprint(api_bp)
    app.register_blueprint(contact_bp)
