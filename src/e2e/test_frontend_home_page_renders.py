import pytest
from typeahead_web.web import app as flask_app

@pytest.mark.e2e
def test_frontend_home_page_renders():
    client = flask_app.test_client()
    r = client.get("/")
    assert r.status_code == 200
    assert r.mimetype == "text/html"
    html = r.data.decode("utf-8", errors="ignore")
    assert "<title>Typeahead" in html
    assert "/api/complete" in html and "/api/next" in html
