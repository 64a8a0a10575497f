"""Query and mutation resolvers.

The request context holds the caller's ``identity`` (or None) and the
service objects; resolvers hand the identity to the services explicitly.
"""
from ariadne import MutationType, ObjectType, QueryType

from donation_site.utils import to_iso

query = QueryType()
mutation = MutationType()
user_type = ObjectType("User")
donation_type = ObjectType("Donation")


@query.field("getDonations")
def resolve_get_donations(_, info):
    return info.context["ledger"].list_donations()


@query.field("getMe")
def resolve_get_me(_, info):
    return info.context["accounts"].get_me(info.context["identity"])


@mutation.field("register")
def resolve_register(_, info, first_name, email, password, role=None):
    token, user = info.context["accounts"].register(first_name, email, password, role)
    return {"token": token, "user": user}


@mutation.field("login")
def resolve_login(_, info, email, password):
    token, user = info.context["accounts"].login(email, password)
    return {"token": token, "user": user}


@mutation.field("addDonation")
def resolve_add_donation(_, info, donor_name, item, message=None, value=None):
    return info.context["ledger"].add_donation(
        info.context["identity"], donor_name, item, message=message, value=value
    )


@user_type.field("createdAt")
def resolve_created_at(user, _):
    return to_iso(user.created_at)


@user_type.field("updatedAt")
def resolve_updated_at(user, _):
    return to_iso(user.updated_at)


@donation_type.field("date")
def resolve_date(donation, _):
    return to_iso(donation.date)


@donation_type.field("submittedBy")
def resolve_submitted_by(donation, _):
    # A dangling submitter id resolves to null for this donation only
    return donation.submitter
