"""
Pages Routes - Public site pages
"""

import os
from datetime import datetime
from flask import render_template, request, abort, send_file, current_app
from utils.data import PROJECTS, load_data, get_project
from . import pages_bp


@pages_bp.route('/')
def index():
    """Single-page portfolio: hero, about, projects, skills, testimonials, contact"""
    data = load_data()
    return render_template('index.html', data=data)


@pages_bp.route('/project/<project_id>')
def project_detail(project_id):
    """Project detail page"""
    project = get_project(project_id)
    if not project:
        abort(404)

    return render_template('project_detail.html',
                           project=project,
                           data=load_data())


@pages_bp.route('/resume.pdf')
def resume():
    """Serve the resume file if one has been deployed"""
    resume_path = current_app.config.get('RESUME_PATH', 'static/resume.pdf')
    if not os.path.isabs(resume_path):
        resume_path = os.path.join(current_app.root_path, resume_path)

    if not os.path.isfile(resume_path):
        current_app.logger.warning(f"Resume file not found at {resume_path}")
        abort(404)

    return send_file(resume_path, mimetype='application/pdf')


@pages_bp.route('/sitemap.xml')
def sitemap():
    """Generate dynamic sitemap for SEO"""
    base_url = request.url_root.rstrip('/')
    today = datetime.now().strftime('%Y-%m-%d')

    sitemap_entries = []
    sitemap_entries.append({
        'loc': f'{base_url}/',
        'changefreq': 'weekly',
        'priority': '1.0',
        'lastmod': today
    })

    for project in PROJECTS:
        sitemap_entries.append({
            'loc': f"{base_url}/project/{project['id']}",
            'changefreq': 'monthly',
            'priority': '0.8',
            'lastmod': today
        })

    sitemap_xml = ['<?xml version="1.0" encoding="UTF-8"?>']
    sitemap_xml.append('<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">')

    for entry in sitemap_entries:
        sitemap_xml.append('<url>')
        sitemap_xml.append(f'<loc>{entry["loc"]}</loc>')
        sitemap_xml.append(f'<lastmod>{entry["lastmod"]}</lastmod>')
        sitemap_xml.append(f'<changefreq>{entry["changefreq"]}</changefreq>')
        sitemap_xml.append(f'<priority>{entry["priority"]}</priority>')
        sitemap_xml.append('</url>')

    sitemap_xml.append('</urlset>')

    response = current_app.make_response('\n'.join(sitemap_xml))
    response.headers['Content-Type'] = 'application/xml; charset=utf-8'
    return response


@pages_bp.route('/robots.txt')
def robots():
    """Generate robots.txt for SEO"""
    robots_txt = """User-agent: *
Allow: /
Allow: /project/
Disallow: /api/

Sitemap: """ + request.url_root.rstrip('/') + "/sitemap.xml\n"

    response = current_app.make_response(robots_txt)
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    return response
