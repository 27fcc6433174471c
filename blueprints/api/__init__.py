"""
API Blueprint - JSON endpoints used by the home page
Handles: Contact form relay, resume download
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
