import fitz  # PyMuPDF


def extract_pdf_pages(buffer: bytes) -> list[str]:
    """Return the plain text of every page, in page order."""
    with fitz.open(stream=buffer, filetype="pdf") as doc:
        if doc.needs_pass:
            raise ValueError("PDF is encrypted")
        if doc.page_count == 0:
            raise ValueError("PDF has no pages")
        return [page.get_text("text") for page in doc]
