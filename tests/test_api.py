from fastapi.testclient import TestClient

from api import app


client = TestClient(app)


def test_analyze_endpoint(sample_project):
	resp = client.post("/analyze", json={"root_path": str(sample_project)})
	assert resp.status_code == 200
	report = resp.json()["report"]
	assert report["files_analyzed"] == 3
	assert report["markup_producing_count"] == 4
	assert report["plain_count"] == 3
	assert report["total_functions"] == 7


def test_analyze_endpoint_with_options(sample_project):
	resp = client.post(
		"/analyze",
		json={"root_path": str(sample_project), "options": {"exclude_nested_markup": True}},
	)
	assert resp.status_code == 200
	assert resp.json()["report"]["plain_count"] == 4


def test_invalid_root(tmp_path):
	resp = client.post("/analyze", json={"root_path": str(tmp_path / "missing")})
	assert resp.status_code == 400


def test_unreadable_file_is_422(sample_project):
	(sample_project / "src" / "bad.ts").write_bytes(b"export const a = '\xff';\n")
	resp = client.post("/analyze", json={"root_path": str(sample_project)})
	assert resp.status_code == 422
	assert "bad.ts" in resp.json()["detail"]


def test_invalid_options_rejected(sample_project):
	resp = client.post("/analyze", json={"root_path": str(sample_project), "options": {"jobs": 0}})
	assert resp.status_code == 422
