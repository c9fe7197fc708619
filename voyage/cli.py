import click
from flask import current_app
from flask.cli import AppGroup
from .extensions import db
from .models import Service
from .utils.money import MoneyFormatError

voyage_cli = AppGroup('voyage')


@voyage_cli.command('format-money')
@click.argument('amount')
@click.option('--format', 'template', default=None, help='Money template, e.g. "{{amount_no_decimals}} EUR".')
def format_money_command(amount, template):
    """Print AMOUNT (minor units) formatted with the shop money format."""
    try:
        click.echo(current_app.extensions['money'].format(amount, template))
    except MoneyFormatError as e:
        raise click.BadParameter(str(e), param_hint='--format')


@voyage_cli.command('add-service')
@click.argument('name')
@click.argument('price_cents', type=int)
@click.option('--description', default='', help='Card description.')
@click.option('--position', default=0, type=int, help='Sort order on the storefront.')
def add_service(name, price_cents, description, position):
    """Add a storefront service priced in minor units."""
    if price_cents < 0:
        raise click.BadParameter('Price must not be negative.', param_hint='PRICE_CENTS')
    if Service.query.filter_by(name=name).first():
        click.echo(f'Service "{name}" already exists.')
        return
    service = Service(name=name, description=description, price_cents=price_cents, position=position)
    db.session.add(service)
    db.session.commit()
    price = current_app.extensions['money'].format(price_cents)
    click.echo(f'Service "{name}" created at {price}.')

def register_cli(app):
    app.cli.add_command(voyage_cli)
