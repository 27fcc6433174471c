"""
Pages Blueprint - Public site pages
Handles: Home page, project detail, resume file, SEO files
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
