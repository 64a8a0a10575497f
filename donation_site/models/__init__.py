"""Models package - Re-exports all models for convenient importing."""
from donation_site.extensions import db
from donation_site.models.user import User
from donation_site.models.donation import Donation

__all__ = ['db', 'User', 'Donation']
