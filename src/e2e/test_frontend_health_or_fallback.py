import pytest
from typeahead import PredictionEngine
from typeahead_web.web import app as flask_app

@pytest.mark.e2e
def test_frontend_health_reports_training(monkeypatch):
    import typeahead_web.web as webmod
    client = flask_app.test_client()

    monkeypatch.setattr(webmod, "_engine", None)
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json() == {"ok": True, "trained": False}

    eng = PredictionEngine(); eng.train("health check line.")
    monkeypatch.setattr(webmod, "_engine", eng)
    assert client.get("/health").get_json() == {"ok": True, "trained": True}
