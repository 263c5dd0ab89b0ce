"""
Job Board - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

import click
from flask import Flask, render_template
from werkzeug.exceptions import NotFound as HTTPNotFound

from jobboard.extensions import db, login_manager
from jobboard.config import Config


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    _init_logging(app)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'

    # Register blueprints
    from jobboard.auth import auth_bp
    from jobboard.admin import admin_bp
    from jobboard.main import main_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(main_bp)

    # Principal loader for Flask-Login
    @login_manager.user_loader
    def load_user(session_id):
        from jobboard.auth.principals import load_principal
        return load_principal(session_id)

    @app.context_processor
    def inject_auth_flags():
        """Inject `is_logged_in` and `is_admin` into every template."""
        from flask_login import current_user
        return dict(
            is_logged_in=current_user.is_authenticated,
            is_admin=getattr(current_user, 'is_admin', False),
        )

    @app.template_filter('excerpt')
    def excerpt_filter(text, length=100):
        from jobboard.services.posts import excerpt
        return excerpt(text, length)

    @app.errorhandler(HTTPNotFound)
    def not_found(e):
        return render_template('error.html', error='Page not found'), 404

    @app.errorhandler(500)
    def internal_error(e):
        db.session.rollback()
        app.logger.exception('Unhandled error')
        return render_template('error.html', error='An error occurred'), 500

    @app.cli.command('create-admin')
    @click.argument('email')
    @click.argument('name')
    @click.password_option()
    def create_admin(email, name, password):
        """Create a user flagged as admin, or promote an existing one."""
        from jobboard.services.accounts import create_admin_user
        user, created = create_admin_user(email, name, password)
        if created:
            click.echo(f'New admin user {user.email} created')
        else:
            click.echo(f'Existing user {user.email} promoted to admin')

    # Create database tables and the upload folder
    with app.app_context():
        uri = app.config['SQLALCHEMY_DATABASE_URI']
        if uri.startswith('sqlite:///') and ':memory:' not in uri:
            os.makedirs(app.instance_path, exist_ok=True)
        os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)
        from jobboard import models  # noqa: F401
        db.create_all()

    return app


def _init_logging(app):
    """Log to stdout at LOG_LEVEL.

    The app logger is the `jobboard` logger, so every module logger in the
    package propagates to the handler set up here.
    """
    level_name = app.config.get('LOG_LEVEL', 'INFO').upper()
    level = getattr(logging, level_name, logging.INFO)

    formatter = logging.Formatter('[%(asctime)s] %(levelname)s in %(module)s: %(message)s')

    package_logger = logging.getLogger('jobboard')
    package_logger.setLevel(level)
    if not package_logger.handlers:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        package_logger.addHandler(stream_handler)

    app.logger.setLevel(level)
    app.logger.info('Logging initialized.')
