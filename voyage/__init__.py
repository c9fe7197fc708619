from flask import Flask
from .extensions import db
from config import config_map
from .cli import register_cli
from .utils.money import MoneyFormatter
import os

def create_app(config_name='default', test_config=None):
    app = Flask(__name__, instance_relative_config=True)

    # SQLite databases live in the instance folder
    os.makedirs(app.instance_path, exist_ok=True)

    app.config.from_object(config_map[config_name])
    if test_config:
        app.config.update(test_config)

    db.init_app(app)

    # Shop money settings; a bad template raises here rather than mid-render
    money_format = app.config.get('MONEY_FORMAT')
    money = MoneyFormatter(money_format)
    money_with_currency = MoneyFormatter(app.config.get('MONEY_WITH_CURRENCY_FORMAT') or money_format)
    app.extensions['money'] = money
    app.extensions['money_with_currency'] = money_with_currency
    app.logger.info('Money formats: %r, %r', money.default_template, money_with_currency.default_template)

    from .blueprints.storefront import storefront_bp
    from .blueprints.api import api_bp

    app.register_blueprint(storefront_bp)
    app.register_blueprint(api_bp)

    register_cli(app)

    # Template filters and globals
    app.add_template_filter(money.format, 'money')
    app.add_template_filter(money_with_currency.format, 'money_with_currency')
    app.jinja_env.globals['format_money'] = money.format

    with app.app_context():
        db.create_all()

    return app
