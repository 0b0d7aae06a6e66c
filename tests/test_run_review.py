import sys

import pytest

import run_review
from conftest import FakeGenAIClient, RecordingSleep
from scholarsync.client import StructuredAnalysisClient
from scholarsync.prompts import TOPIC_PLACEHOLDER


@pytest.fixture
def pdf_folder(tmp_path, pdf_bytes):
    folder = tmp_path / "pdfs"
    folder.mkdir()
    (folder / "Kong_2023.pdf").write_bytes(pdf_bytes)
    return folder


@pytest.fixture(autouse=True)
def _workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SCHOLARSYNC_MODEL", raising=False)


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["run_review.py", *argv])
    return run_review.main()


def test_missing_config_file_reports_error(monkeypatch, capsys, pdf_folder, tmp_path):
    code = _run(
        monkeypatch,
        "--topic", "Remote work and cohesion",
        "--pdfs", str(pdf_folder),
        "--config", str(tmp_path / "missing.yaml"),
        "--quiet",
    )

    assert code == 1
    out = capsys.readouterr().out
    assert "ERROR" in out
    assert "Traceback" not in out


def test_topic_with_placeholder_is_rejected_before_analysis(monkeypatch, capsys, pdf_folder):
    def _fail(**kwargs):
        raise AssertionError("client should not be built")

    monkeypatch.setattr(run_review, "StructuredAnalysisClient", _fail)
    code = _run(monkeypatch, "--topic", f"about {TOPIC_PLACEHOLDER}", "--pdfs", str(pdf_folder))

    assert code == 1
    assert "ERROR" in capsys.readouterr().out


def test_missing_documents_returns_error(monkeypatch, capsys, tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    code = _run(monkeypatch, "--topic", "Remote work", "--pdfs", str(empty))

    assert code == 1
    assert "at least one PDF" in capsys.readouterr().out


def test_missing_api_key_returns_error(monkeypatch, capsys, pdf_folder):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    code = _run(monkeypatch, "--topic", "Remote work", "--pdfs", str(pdf_folder), "--quiet")

    assert code == 1
    assert "GEMINI_API_KEY" in capsys.readouterr().out


def test_successful_run_writes_report(monkeypatch, payload_json, pdf_folder, tmp_path):
    fake = FakeGenAIClient(payload_json)
    monkeypatch.setattr(
        run_review,
        "StructuredAnalysisClient",
        lambda settings: StructuredAnalysisClient(settings=settings, client=fake, sleep=RecordingSleep()),
    )

    code = _run(
        monkeypatch,
        "--topic", "Generative AI in CS education",
        "--pdfs", str(pdf_folder),
        "--output", str(tmp_path / "out"),
        "--excel",
        "--quiet",
    )

    assert code == 0
    assert len(fake.calls) == 1
    reports = list((tmp_path / "out").glob("ScholarSync_Report_*.md"))
    assert len(reports) == 1
    assert "## 1. Summary Overview" in reports[0].read_text(encoding="utf-8")
    assert list((tmp_path / "out").glob("*_summary.xlsx"))
