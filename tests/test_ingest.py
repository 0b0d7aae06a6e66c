import base64

import pytest

from scholarsync.ingest import PDF_MIME_TYPE, collect_documents, decode_data_url, load_document


def test_decode_data_url(pdf_bytes):
    url = "data:application/pdf;base64," + base64.b64encode(pdf_bytes).decode()
    doc = decode_data_url(url, name="kong.pdf")
    assert doc.mime_type == "application/pdf"
    assert doc.data == pdf_bytes
    assert doc.name == "kong.pdf"


def test_decode_data_url_with_extra_parameters():
    url = "data:application/pdf;name=a.pdf;base64," + base64.b64encode(b"%PDF-1.4").decode()
    assert decode_data_url(url).data == b"%PDF-1.4"


@pytest.mark.parametrize(
    "url",
    [
        "JVBERi0xLjQ=",
        "data:application/pdf,plain-text",
        "data:application/pdf;base64,not*base64!",
        "data:application/pdf;base64,",
    ],
)
def test_decode_data_url_rejects_malformed_input(url):
    with pytest.raises(ValueError):
        decode_data_url(url)


def test_load_document(tmp_path, pdf_bytes):
    path = tmp_path / "Kong_2023.pdf"
    path.write_bytes(pdf_bytes)

    doc = load_document(path)
    assert doc.mime_type == PDF_MIME_TYPE
    assert doc.data == pdf_bytes
    assert doc.name == "Kong_2023.pdf"


def test_load_document_rejects_non_pdf_header(tmp_path):
    path = tmp_path / "fake.pdf"
    path.write_bytes(b"GIF89a" + b"0" * 2048)
    with pytest.raises(ValueError, match="Invalid PDF header"):
        load_document(path)


def test_collect_documents_expands_folders_and_skips_invalid(tmp_path, pdf_bytes):
    folder = tmp_path / "pdfs"
    folder.mkdir()
    (folder / "b.pdf").write_bytes(pdf_bytes)
    (folder / "a.pdf").write_bytes(pdf_bytes)
    (folder / "tiny.pdf").write_bytes(b"%PDF-")
    (folder / "notes.txt").write_text("ignored", encoding="utf-8")
    single = tmp_path / "c.pdf"
    single.write_bytes(pdf_bytes)

    documents, skipped = collect_documents([folder, single, tmp_path / "missing.pdf"])

    assert [d.name for d in documents] == ["a.pdf", "b.pdf", "c.pdf"]
    assert [name for name, _ in skipped] == ["tiny.pdf", "missing.pdf"]
    assert "too small" in skipped[0][1]
