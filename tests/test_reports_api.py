import uuid

import pytest
from fastapi.testclient import TestClient

import trend_report.routers.reports as reports_router_module
from trend_report.main import app
from trend_report.services.pdf_service import EncodingFailure


def test_health_route():
    with TestClient(app) as client:
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": "Healthy"}
        assert "X-Process-Time" in response.headers


def test_list_trends_uses_camel_case_fields():
    with TestClient(app) as client:
        response = client.get("/api/trends")
        assert response.status_code == 200
        payload = response.json()
        assert len(payload) == 5
        assert set(payload[0]) == {"id", "title", "summary", "sourceUrl", "date"}


def test_report_docx_and_pdf_flow():
    with TestClient(app) as client:
        created = client.post("/api/reports")
        assert created.status_code == 200
        report_id = created.json()["reportId"]
        uuid.UUID(report_id)

        docx = client.get(f"/api/reports/{report_id}/download")
        assert docx.status_code == 200
        assert docx.headers["content-type"].startswith(
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
        )
        assert docx.headers["content-disposition"] == 'attachment; filename="AI-Trends-Report.docx"'
        assert docx.content.startswith(b"PK")

        pdf = client.get(f"/api/reports/{report_id}/pdf")
        assert pdf.status_code == 200
        assert pdf.headers["content-type"] == "application/pdf"
        assert pdf.headers["content-disposition"] == 'attachment; filename="AI-Trends-Report.pdf"'
        assert pdf.content.startswith(b"%PDF-1.4\n")
        assert pdf.content.endswith(b"%%EOF")
        assert b"Generative Design with AI" in pdf.content


def test_pdf_inline_disposition():
    with TestClient(app) as client:
        report_id = client.post("/api/reports").json()["reportId"]
        response = client.get(f"/api/reports/{report_id}/pdf", params={"inline": "true"})
        assert response.status_code == 200
        assert response.headers["content-disposition"] == 'inline; filename="AI-Trends-Report.pdf"'


def test_unknown_report_is_404():
    missing = uuid.uuid4()
    with TestClient(app) as client:
        for suffix in ("download", "pdf"):
            response = client.get(f"/api/reports/{missing}/{suffix}")
            assert response.status_code == 404
            assert response.json() == {"detail": "Report not found"}


def test_malformed_report_id_is_rejected():
    with TestClient(app) as client:
        response = client.get("/api/reports/not-a-uuid/pdf")
        assert response.status_code == 422


def test_pdf_encoding_failure_maps_to_500(monkeypatch: pytest.MonkeyPatch):
    def _fail(*_args, **_kwargs):
        raise EncodingFailure("Out of memory while writing PDF output")

    monkeypatch.setattr(reports_router_module.pdf_service, "generate_pdf", _fail)

    with TestClient(app) as client:
        report_id = client.post("/api/reports").json()["reportId"]
        response = client.get(f"/api/reports/{report_id}/pdf")
        assert response.status_code == 500
        assert response.json() == {"detail": "PDF render failed: Out of memory while writing PDF output"}


def test_report_file_basename_is_configurable(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(reports_router_module.settings, "REPORT_FILE_BASENAME", "Weekly")

    with TestClient(app) as client:
        report_id = client.post("/api/reports").json()["reportId"]
        response = client.get(f"/api/reports/{report_id}/download")
        assert response.headers["content-disposition"] == 'attachment; filename="Weekly.docx"'


def test_openapi_lists_report_routes():
    with TestClient(app) as client:
        schema = client.get("/openapi.json").json()
        assert "/api/trends" in schema["paths"]
        assert "/api/reports" in schema["paths"]
        assert "/api/reports/{report_id}/pdf" in schema["paths"]
        assert {tag["name"] for tag in schema["tags"]} >= {"trends", "reports"}
