"""Donation ledger: public listing and admin-only recording."""
import logging
import math

from donation_site.errors import UnauthorizedError, ValidationError
from donation_site.models.donation import Donation, MAX_DONOR_NAME_LENGTH, MAX_ITEM_LENGTH
from donation_site.models.user import User
from donation_site.utils import utcnow

logger = logging.getLogger(__name__)


def _clean_text(value, field, required=False, max_length=None):
    value = value.strip() if isinstance(value, str) else value
    if required and not value:
        raise ValidationError(f'{field} is required')
    if max_length and value and len(value) > max_length:
        raise ValidationError(f'{field} must be at most {max_length} characters')
    return value


def _clean_value(value):
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValidationError('Donation value must be a number')
    if value < 0:
        raise ValidationError('Donation value cannot be negative')
    return float(value)


class DonationLedger:
    """Append-only store of donations. No update or delete is offered."""

    def __init__(self, session):
        self.session = session

    def list_donations(self):
        """All donations, most recent first, submitter preloaded (None if gone)."""
        return (
            self.session.query(Donation)
            .order_by(Donation.date.desc(), Donation.id)
            .all()
        )

    def add_donation(self, identity, donor_name, item, message=None, value=None):
        if identity is None or not identity.is_admin:
            raise UnauthorizedError('Only admins can add donations')

        donor_name = _clean_text(donor_name, 'Donor name', required=True, max_length=MAX_DONOR_NAME_LENGTH)
        item = _clean_text(item, 'Item', required=True, max_length=MAX_ITEM_LENGTH)
        message = _clean_text(message, 'Message')
        value = _clean_value(value)

        if self.session.get(User, identity.user_id) is None:
            raise UnauthorizedError('Submitting user no longer exists')

        donation = Donation(
            donor_name=donor_name,
            item=item,
            message=message,
            value=value,
            date=utcnow(),
            submitted_by=identity.user_id,
        )
        self.session.add(donation)
        self.session.commit()

        logger.info(f"Recorded donation {donation.id} from {donation.donor_name} by {identity.email}")
        return donation
