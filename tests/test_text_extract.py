from unittest.mock import MagicMock

import pytest

from talentpatriot_resume.errors import ExtractionError, StorageError, UnsupportedFormatError
from talentpatriot_resume.schemas import ExtractionResult
from talentpatriot_resume.utils import text_extract
from talentpatriot_resume.utils.formats import DOC_MIME, DOCX_MIME, PDF_MIME
from talentpatriot_resume.utils.text_extract import (
    count_words,
    extract_from_doc,
    extract_from_docx,
    extract_from_pdf,
    extract_from_storage_path,
    extract_text,
)

from conftest import make_docx, make_pdf


def test_pdf_extraction_reports_pages_and_words(resume_pdf):
    result = extract_from_pdf(resume_pdf)
    assert result.page_count == 3
    assert result.word_count > 0
    assert result.word_count == len(result.text.split())
    assert "Jane Smith" in result.text


def test_corrupt_pdf_raises_extraction_error():
    with pytest.raises(ExtractionError) as exc_info:
        extract_from_pdf(b"this is not a pdf at all")
    assert exc_info.value.__cause__ is not None


def test_encrypted_pdf_raises_extraction_error():
    import fitz

    doc = fitz.open()
    doc.new_page().insert_text((72, 72), "secret resume")
    data = doc.tobytes(encryption=fitz.PDF_ENCRYPT_AES_256, owner_pw="owner", user_pw="user")
    doc.close()

    with pytest.raises(ExtractionError):
        extract_from_pdf(data)


def test_docx_extraction_has_no_page_count(resume_docx):
    result = extract_from_docx(resume_docx)
    assert result.page_count is None
    assert "Senior Software Engineer" in result.text
    assert result.word_count == len(result.text.split())


def test_docx_tables_are_included():
    from docx import Document
    import io

    doc = Document()
    doc.add_paragraph("Skills")
    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Python"
    table.rows[0].cells[1].text = "Kubernetes"
    buf = io.BytesIO()
    doc.save(buf)

    assert extract_from_docx(buf.getvalue()).text == "Skills\nPython | Kubernetes"


def test_docx_tables_keep_their_position_between_paragraphs():
    from docx import Document
    import io

    doc = Document()
    doc.add_paragraph("Experience")
    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Acme"
    table.rows[0].cells[1].text = "2020"
    doc.add_paragraph("Education")
    buf = io.BytesIO()
    doc.save(buf)

    assert extract_from_docx(buf.getvalue()).text == "Experience\nAcme | 2020\nEducation"


def test_corrupt_docx_raises_extraction_error():
    with pytest.raises(ExtractionError):
        extract_from_docx(b"PK\x03\x04 definitely not a zip")


def test_doc_uses_docx_reader(resume_docx):
    assert extract_from_doc(resume_docx) == extract_from_docx(resume_docx)


def test_legacy_binary_doc_is_not_supported_by_docx_reader():
    ole_header = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 512
    with pytest.raises(ExtractionError):
        extract_from_doc(ole_header)


@pytest.mark.parametrize(
    "mime, target",
    [(PDF_MIME, "extract_from_pdf"), (DOCX_MIME, "extract_from_docx"), (DOC_MIME, "extract_from_doc")],
)
def test_extract_text_dispatches_by_mime(monkeypatch, mime, target):
    sentinel = ExtractionResult(text="routed", word_count=1)
    calls = []

    def fake(buffer):
        calls.append(buffer)
        return sentinel

    monkeypatch.setattr(text_extract, target, fake)
    assert extract_text(b"data", mime) is sentinel
    assert calls == [b"data"]


def test_extract_text_rejects_unknown_mime():
    with pytest.raises(UnsupportedFormatError, match="text/plain"):
        extract_text(b"data", "text/plain")


def test_extract_from_storage_path(resume_docx):
    store = MagicMock()
    store.download.return_value = resume_docx

    result = extract_from_storage_path(store, "org/candidate/resume.docx")

    store.download.assert_called_once_with("org/candidate/resume.docx")
    assert "Jane Smith" in result.text


def test_extract_from_storage_path_keeps_storage_error():
    store = MagicMock()
    store.download.side_effect = StorageError("missing")
    with pytest.raises(StorageError):
        extract_from_storage_path(store, "resume.pdf")


def test_extract_from_storage_path_unsupported_extension():
    store = MagicMock()
    store.download.return_value = b"hello"
    with pytest.raises(UnsupportedFormatError) as exc_info:
        extract_from_storage_path(store, "resume.odt")
    assert exc_info.value.extension == "odt"


def test_count_words():
    assert count_words("  one two\nthree\t four  ") == 4
    assert count_words("") == 0


def test_pdf_page_text_is_joined_in_order():
    data = make_pdf(["first page", "second page"])
    text = extract_from_pdf(data).text
    assert text.index("first page") < text.index("second page")


def test_docx_only_na_text():
    result = extract_from_docx(make_docx(["N/A"]))
    assert result.text == "N/A"
    assert result.word_count == 1
