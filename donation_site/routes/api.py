"""GraphQL endpoint."""

from ariadne import graphql_sync
from ariadne.explorer import ExplorerGraphiQL
from flask import Blueprint, current_app, g, jsonify, request

from donation_site.extensions import db
from donation_site.schema import format_api_error, schema
from donation_site.services.accounts import AccountService
from donation_site.services.donations import DonationLedger

api_bp = Blueprint('api', __name__)

explorer_html = ExplorerGraphiQL(title='Donations API').html(None)


def build_context():
    """Per-request context: the verified identity and the services it is passed to."""
    auth = current_app.extensions['auth_service']
    return {
        'request': request,
        'identity': g.get('identity'),
        'accounts': AccountService(db.session, auth),
        'ledger': DonationLedger(db.session),
    }


@api_bp.route('/graphql', methods=['GET'])
def graphql_explorer():
    return explorer_html, 200


@api_bp.route('/graphql', methods=['POST'])
def graphql_server():
    data = request.get_json(silent=True)
    success, result = graphql_sync(
        schema,
        data,
        context_value=build_context(),
        debug=current_app.debug,
        error_formatter=format_api_error,
        logger='donation_site.graphql',
    )
    return jsonify(result), 200 if success else 400
