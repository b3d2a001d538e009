import io

from docx import Document
from docx.table import Table


def _table_lines(table: Table) -> list[str]:
    lines: list[str] = []
    for row in table.rows:
        cells = [(c.text or "").strip() for c in row.cells]
        line = " | ".join([c for c in cells if c])
        if line:
            lines.append(line)
    return lines


def extract_docx_text(buffer: bytes) -> str:
    """Body text of a .docx, paragraphs and table rows in document order."""
    doc = Document(io.BytesIO(buffer))
    parts: list[str] = []

    for block in doc.iter_inner_content():
        if isinstance(block, Table):
            parts.extend(_table_lines(block))
            continue
        t = (block.text or "").strip()
        if t:
            parts.append(t)

    return "\n".join(parts).strip()
