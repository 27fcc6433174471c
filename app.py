"""
Portfolio Site - Main Application Entry Point
Built using the Application Factory Pattern

This module initializes the Flask application with its extensions,
configuration, and middleware. All route handling is delegated to blueprints.
"""

import os
import logging
from datetime import datetime
from flask import Flask, render_template, request, jsonify
from werkzeug.middleware.proxy_fix import ProxyFix
from config import get_config
from extensions import db
from utils.data import PROFILE, NAV_ITEMS, SOCIAL_LINKS, get_global_meta
from utils.helpers import nl2br

from blueprints.api import api_bp
from blueprints.pages import pages_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)

    configure_logging(app)

    # Trust X-Forwarded-For only from the configured number of proxies
    proxy_hops = app.config.get('PROXY_FIX_X_FOR', 0)
    if proxy_hops > 0:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=proxy_hops)
        app.logger.debug(f'✓ ProxyFix enabled for {proxy_hops} proxy hop(s)')

    # Initialize extensions with app
    initialize_extensions(app)

    # Register Jinja filters
    app.jinja_env.filters['nl2br'] = nl2br
    app.logger.debug('✓ Registered Jinja filter: nl2br')

    register_blueprints(app)
    register_error_handlers(app)
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio site is running'}, 200

    return app


def configure_logging(app):
    """Set the app logger level from LOG_LEVEL"""
    level = getattr(logging, app.config.get('LOG_LEVEL', 'INFO'), logging.INFO)
    app.logger.setLevel(level)


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)

    # Create tables if they don't exist
    with app.app_context():
        try:
            from sqlalchemy import text
            import models  # noqa: F401
            db.create_all()
            # Verify connection
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database initialized successfully")
        except Exception as e:
            # Site and mail relay keep working without the message log
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(api_bp)


def _wants_json():
    return request.path.startswith('/api/')


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(400)
    def bad_request(e):
        if _wants_json():
            return jsonify({'success': False, 'message': 'Bad request'}), 400
        return render_template('400.html'), 400

    @app.errorhandler(404)
    def page_not_found(e):
        if _wants_json():
            return jsonify({'success': False, 'message': 'Not found'}), 404
        return render_template('404.html'), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        if _wants_json():
            return jsonify({'success': False, 'message': 'Method not allowed'}), 405
        return render_template('404.html'), 405

    @app.errorhandler(413)
    def payload_too_large(e):
        return jsonify({'success': False, 'message': 'Request body is too large'}), 413

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        if _wants_json():
            return jsonify({'success': False, 'message': 'Internal server error'}), 500
        return render_template('500.html'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        """Site-wide template variables"""
        endpoint = request.endpoint.split('.')[-1] if request.endpoint else None
        return {
            'profile': PROFILE,
            'nav_items': NAV_ITEMS,
            'social_links': SOCIAL_LINKS,
            'default_meta': get_global_meta(),
            'current_year': datetime.now().year,
            'page_class': f'page-{endpoint}' if endpoint else 'page-default',
            'contact_min_length': app.config.get('CONTACT_MESSAGE_MIN_LENGTH', 10)
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "script-src 'self'; "
            "style-src 'self' 'unsafe-inline'; "
            "font-src 'self' data:; "
            "img-src 'self' data: https://images.unsplash.com; "
            "connect-src 'self'; "
            "frame-ancestors 'none';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


# Create app instance for gunicorn
app = create_app()

if __name__ == '__main__':
    env = os.environ.get('FLASK_ENV', 'development')

    app = create_app(env)

    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
