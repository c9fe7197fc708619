from flask import Blueprint, current_app, jsonify, request
from ..utils.money import MoneyFormatError

api_bp = Blueprint('api', __name__, url_prefix='/api')


@api_bp.route('/money')
def format_money():
    """Format ``amount`` (minor units) for client-side price updates.

    An optional ``format`` argument overrides the shop money format.
    Unparseable amounts render as zero; bad templates give a 400.
    """
    amount = request.args.get('amount')
    template = request.args.get('format') or None
    try:
        formatted = current_app.extensions['money'].format(amount, template)
    except MoneyFormatError as e:
        return jsonify(error=str(e)), 400
    return jsonify(formatted=formatted)
