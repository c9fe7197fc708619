from flask import Blueprint, render_template
from ..models import Service

storefront_bp = Blueprint('storefront', __name__)

@storefront_bp.route('/')
@storefront_bp.route('/services')
def index():
    services = Service.query.order_by(Service.position, Service.name).all()
    return render_template('storefront/index.html', services=services)

@storefront_bp.route('/services/<int:service_id>')
def view_service(service_id):
    service = Service.query.filter_by(id=service_id).first_or_404()
    return render_template('storefront/service.html', service=service)
