import json
from types import SimpleNamespace

import pytest

from cli import convert_job


@pytest.fixture(autouse=True)
def _quiet_settings(monkeypatch):
    monkeypatch.setattr(convert_job, "load_settings", lambda: SimpleNamespace(debug_logs=False))
    yield


def _write(tmp_path, document) -> str:
    path = tmp_path / "job.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return str(path)


def test_record_to_form(tmp_path, capsys) -> None:
    path = _write(tmp_path, {"success": True, "data": {"company": "Acme", "location": "NYC", "jobType": "part_time"}})

    assert convert_job.main([path]) == 0

    form = json.loads(capsys.readouterr().out)
    assert form["company"] == "Acme"
    assert form["location"] == "NYC"
    assert form["job_type"] == "part-time"


def test_form_to_payload(tmp_path, capsys) -> None:
    path = _write(tmp_path, {"title": "Cook", "benefits": ["401(k) Matching"]})

    assert convert_job.main([path, "--from", "form", "--to", "payload", "--status", "open"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["status"] == "active"
    assert payload["benefits"] == ["retirement_401k"]


def test_validate_reports_first_failing_step(tmp_path, capsys) -> None:
    path = _write(tmp_path, {"title": "Cook", "description": "d", "category": "c"})

    assert convert_job.main([path, "--validate"]) == 1

    err = capsys.readouterr().err
    assert "Blocked at step 2 (Company)" in err
    assert "Company name is required" in err


def test_missing_file_exits(tmp_path) -> None:
    with pytest.raises(SystemExit, match="File not found"):
        convert_job.main([str(tmp_path / "missing.json")])


def test_invalid_form_document_exits(tmp_path) -> None:
    path = _write(tmp_path, {"colour": "red"})

    with pytest.raises(SystemExit, match="Invalid form document"):
        convert_job.main([path, "--from", "form"])
