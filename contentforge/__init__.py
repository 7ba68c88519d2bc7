# contentforge/__init__.py
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

__version__ = '1.0.0'

db = SQLAlchemy()
migrate = Migrate()


def create_app(config_object='contentforge.config.Config'):
    app = Flask(__name__)
    app.config.from_object(config_object)

    db.init_app(app)
    migrate.init_app(app, db)

    # Register models so Flask-Migrate and create_all() can see them
    with app.app_context():
        from . import models

    from contentforge.health import health_bp
    from contentforge.articles import articles_bp
    from contentforge.generators import generators_bp
    from contentforge.news import news_bp
    app.register_blueprint(health_bp, url_prefix='/')
    app.register_blueprint(articles_bp, url_prefix='/api')
    app.register_blueprint(generators_bp, url_prefix='/api')
    app.register_blueprint(news_bp, url_prefix='/api')

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.description}), e.code

    return app
