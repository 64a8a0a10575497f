"""Contact form relay."""
import logging

from flask import Blueprint, current_app, jsonify, request

from donation_site.services.mailer import ContactMessage, MailerNotConfigured, send_contact_message

logger = logging.getLogger(__name__)

contact_bp = Blueprint('contact', __name__)


def _text_field(payload, key):
    """Trimmed string value of ``key``; anything that is not a string counts as missing."""
    value = payload.get(key)
    return value.strip() if isinstance(value, str) else ''


@contact_bp.route('/api/contact', methods=['POST'])
async def submit_contact():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    name = _text_field(payload, 'name')
    email = _text_field(payload, 'email')
    message = _text_field(payload, 'message')
    subject = _text_field(payload, 'subject') or None

    if not name or not email or not message:
        return jsonify({'message': 'Name, Email, and Message are required fields.'}), 400

    contact = ContactMessage(name=name, email=email, subject=subject, message=message)
    try:
        await send_contact_message(current_app.config, contact)
    except MailerNotConfigured as e:
        logger.error(f"Contact form unavailable: {e}")
        return jsonify({'message': 'Failed to send message.'}), 500
    except Exception:
        logger.exception("Error sending contact form email")
        return jsonify({'message': 'Failed to send message.'}), 500

    logger.info("Contact form email sent")
    return jsonify({'message': 'Message sent successfully!'}), 200
