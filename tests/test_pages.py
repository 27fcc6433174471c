# =============================================================================
# tests/test_pages.py - Public Page Tests
# =============================================================================
# Home page sections, project detail, resume, SEO files, error handling
# and response headers.
#
# Run with: pytest tests/test_pages.py -v
# =============================================================================

import pytest

from utils.data import NAV_ITEMS, PROJECTS, TESTIMONIALS


# =============================================================================
# Home page
# =============================================================================

class TestHomePage:
    """The single-page portfolio."""

    def test_renders_every_section(self, client):
        response = client.get("/")

        assert response.status_code == 200
        html = response.get_data(as_text=True)
        for item in NAV_ITEMS:
            assert f'id="{item["id"]}"' in html

    def test_shows_profile_and_content(self, client):
        html = client.get("/").get_data(as_text=True)

        assert "Alex Chen" in html
        assert "Senior Frontend &amp; AI Engineer" in html
        for project in PROJECTS:
            assert project["title"] in html
        for testimonial in TESTIMONIALS:
            assert testimonial["name"] in html

    def test_contact_form_posts_to_api(self, client):
        html = client.get("/").get_data(as_text=True)

        assert 'id="contact-form"' in html
        assert 'action="/api/contact"' in html
        for field in ("firstName", "lastName", "email", "subject", "message"):
            assert f'name="{field}"' in html
        assert 'minlength="10"' in html

    def test_project_dialogs_are_embedded(self, client):
        html = client.get("/").get_data(as_text=True)

        for project in PROJECTS:
            assert f'id="project-dialog-{project["id"]}"' in html


# =============================================================================
# Project detail
# =============================================================================

class TestProjectDetail:
    """/project/<id> pages."""

    @pytest.mark.parametrize("project", PROJECTS, ids=[p["id"] for p in PROJECTS])
    def test_known_project_renders_full_write_up(self, client, project):
        response = client.get(f"/project/{project['id']}")

        assert response.status_code == 200
        html = response.get_data(as_text=True)
        assert project["title"] in html
        assert "Key Features" in html
        assert "Challenges &amp; Solutions" in html
        assert "Results &amp; Impact" in html
        for tech in project["technologies"]:
            assert tech in html

    def test_unknown_project_is_404(self, client):
        response = client.get("/project/does-not-exist")

        assert response.status_code == 404
        assert "does not exist" in response.get_data(as_text=True)


# =============================================================================
# Resume
# =============================================================================

class TestResume:
    """Resume descriptor and file."""

    def test_download_descriptor(self, client):
        response = client.get("/api/resume/download")

        assert response.status_code == 200
        assert response.get_json() == {
            "success": True,
            "message": "Resume download initiated",
            "downloadUrl": "/resume.pdf",
        }

    def test_missing_resume_is_404(self, app, client, tmp_path):
        app.config["RESUME_PATH"] = str(tmp_path / "missing.pdf")

        assert client.get("/resume.pdf").status_code == 404

    def test_resume_file_is_served(self, app, client, tmp_path):
        resume = tmp_path / "resume.pdf"
        resume.write_bytes(b"%PDF-1.4 test resume")
        app.config["RESUME_PATH"] = str(resume)

        response = client.get("/resume.pdf")

        assert response.status_code == 200
        assert response.mimetype == "application/pdf"
        assert response.data.startswith(b"%PDF")
        response.close()


# =============================================================================
# SEO, health, errors, headers
# =============================================================================

class TestSiteInfrastructure:
    """Sitemap, robots, health check, error handlers and headers."""

    def test_sitemap_lists_home_and_projects(self, client):
        response = client.get("/sitemap.xml")

        assert response.status_code == 200
        assert response.headers["Content-Type"].startswith("application/xml")
        xml = response.get_data(as_text=True)
        assert "<loc>http://localhost/</loc>" in xml
        for project in PROJECTS:
            assert f"<loc>http://localhost/project/{project['id']}</loc>" in xml

    def test_sitemap_reads_project_records_without_copying(self, client, monkeypatch):
        def fail():
            raise AssertionError("sitemap should not deep-copy all content")
        monkeypatch.setattr("blueprints.pages.routes.load_data", fail)

        response = client.get("/sitemap.xml")

        assert response.status_code == 200
        assert response.get_data(as_text=True).count("/project/") == len(PROJECTS)

    def test_robots_blocks_api_and_points_at_sitemap(self, client):
        response = client.get("/robots.txt")

        text = response.get_data(as_text=True)
        assert response.status_code == 200
        assert "Disallow: /api/" in text
        assert "Sitemap: http://localhost/sitemap.xml" in text

    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.get_json()["status"] == "ok"

    def test_unknown_api_route_returns_json_404(self, client):
        response = client.get("/api/nope")

        assert response.status_code == 404
        assert response.get_json() == {"success": False, "message": "Not found"}

    def test_contact_rejects_get(self, client):
        response = client.get("/api/contact")

        assert response.status_code == 405
        assert response.get_json()["success"] is False

    def test_unknown_page_renders_html_404(self, client):
        response = client.get("/nope")

        assert response.status_code == 404
        assert response.mimetype == "text/html"

    def test_security_headers_are_set(self, client):
        response = client.get("/")

        assert "Content-Security-Policy" in response.headers
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "max-age=31536000" in response.headers["Strict-Transport-Security"]
