"""GraphQL schema, error formatting and request context."""
from ariadne import format_error, make_executable_schema, unwrap_graphql_error

from donation_site.errors import DonationSiteError
from donation_site.schema.resolvers import donation_type, mutation, query, user_type
from donation_site.schema.type_defs import type_defs

schema = make_executable_schema(
    type_defs,
    query,
    mutation,
    user_type,
    donation_type,
    convert_names_case=True,
)


def format_api_error(error, debug=False):
    """Report domain errors with their code; anything else the default way."""
    original = unwrap_graphql_error(error)
    if isinstance(original, DonationSiteError):
        formatted = error.formatted
        formatted["extensions"] = {"code": original.code}
        return formatted
    return format_error(error, debug)
