from donation_site.models import Donation, User, db
from donation_site.utils import to_iso


def test_password_is_hashed(app):
    user = User(first_name='Abel', email='a@x.com')
    user.set_password('secret1')
    db.session.add(user)
    db.session.commit()

    assert user.password_hash != 'secret1'
    assert user.check_password('secret1')
    assert not user.check_password('secret2')
    assert not user.check_password(None)


def test_same_password_gets_different_salt(app):
    first, second = User(), User()
    first.set_password('secret1')
    second.set_password('secret1')
    assert first.password_hash != second.password_hash


def test_defaults(app):
    user = User(first_name='Abel', email='a@x.com')
    user.set_password('secret1')
    db.session.add(user)
    db.session.commit()

    assert user.role == 'user'
    assert len(user.id) == 32
    assert user.created_at is not None
    assert user.updated_at is not None


def test_donation_submitter_relationship(app):
    user = User(first_name='Admin', email='admin@x.com', role='admin')
    user.set_password('secret1')
    db.session.add(user)
    db.session.commit()

    donation = Donation(donor_name='Jane', item='$50', submitted_by=user.id)
    db.session.add(donation)
    db.session.commit()

    assert donation.date is not None
    assert donation.submitter is user


def test_dangling_submitter_loads_none(app):
    donation = Donation(donor_name='Jane', item='$50', submitted_by='gone')
    db.session.add(donation)
    db.session.commit()
    db.session.expire_all()

    assert db.session.get(Donation, donation.id).submitter is None


def test_to_iso():
    from datetime import datetime

    assert to_iso(datetime(2025, 5, 1, 12, 30)) == '2025-05-01T12:30:00+00:00'
    assert to_iso(None) is None
    assert to_iso('yesterday') is None
