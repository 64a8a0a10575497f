"""Donation model - the append-only ledger."""
from donation_site.extensions import db
from donation_site.models.user import new_id
from donation_site.utils import utcnow

MAX_DONOR_NAME_LENGTH = 200
MAX_ITEM_LENGTH = 500


class Donation(db.Model):
    __tablename__ = 'donations'

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    donor_name = db.Column(db.String(MAX_DONOR_NAME_LENGTH), nullable=False)
    item = db.Column(db.String(MAX_ITEM_LENGTH), nullable=False)  # "$50", "two boxes of books", ...
    value = db.Column(db.Float, nullable=True)
    message = db.Column(db.Text, nullable=True)
    date = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)

    # Weak reference: no FK, a removed user leaves the id dangling
    submitted_by = db.Column(db.String(32), nullable=False)

    submitter = db.relationship(
        'User',
        primaryjoin='foreign(Donation.submitted_by) == User.id',
        viewonly=True,
        lazy='joined',
    )

    def __repr__(self):
        return f'<Donation {self.donor_name}: {self.item}>'
