from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).parent / "src"))


def _client():
    pytest.importorskip("fastapi")
    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient
    from letter_preview import app

    return TestClient(app)


def test_health_lists_variants() -> None:
    response = _client().get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["available_variants"] == ["dated", "salutation"]
    assert payload["filename"] == "test.pdf"


def test_letter_endpoint_downloads_pdf() -> None:
    response = _client().get("/letter")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert "attachment" in response.headers["content-disposition"]
    assert response.content.startswith(b"%PDF-")


def test_letter_endpoint_accepts_dated_variant() -> None:
    response = _client().get("/letter", params={"variant": "dated"})

    assert response.status_code == 200
    assert response.content.startswith(b"%PDF-")


def test_letter_endpoint_rejects_invalid_variant() -> None:
    response = _client().get("/letter", params={"variant": "postcard"})

    assert response.status_code == 400
    assert "Unsupported letter variant" in response.json()["detail"]


def test_lambda_endpoint_returns_proxy_response() -> None:
    response = _client().get("/letter/lambda")

    assert response.status_code == 200
    payload = response.json()
    assert payload["statusCode"] == 200
    assert payload["isBase64Encoded"] is True
    assert payload["headers"]["Content-Type"] == "application/pdf"


def test_render_failure_maps_to_503(monkeypatch: pytest.MonkeyPatch) -> None:
    client = _client()
    import letter_preview

    def _broken_build(*_args, **_kwargs):
        raise RuntimeError("PDF renderer returned an empty document.")

    monkeypatch.setattr(letter_preview, "build_letter_response", _broken_build)

    response = client.get("/letter")

    assert response.status_code == 503
    assert "empty document" in response.json()["detail"]
