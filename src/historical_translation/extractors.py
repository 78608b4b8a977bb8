"""
Text extraction from facsimiles and glossary documents.

Readers wrap PyMuPDF (PDF), python-docx (Word) and Tesseract via
pytesseract (scanned images). The libraries are imported lazily so the
glossary core stays importable without them.
"""

import logging
import shlex
import string
from dataclasses import dataclass
from pathlib import Path

from .normalizer import normalize_historical_text

logger = logging.getLogger("historical-translation.extractors")

PDF_EXTENSIONS = {".pdf"}
IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".tif", ".tiff"}
DOCX_EXTENSIONS = {".docx"}
PLAIN_TEXT_EXTENSIONS = {".txt", ".md"}

OCR_CHAR_WHITELIST = string.ascii_letters + string.digits + ".,;:!?()[]{}\"'-/\\"


class ExtractionError(Exception):
    """Base error for document extraction."""
    pass


class UnsupportedFormatError(ExtractionError):
    """The file extension has no reader."""
    pass


class DocumentExtractionError(ExtractionError):
    """A reader failed on the file."""
    pass


@dataclass
class ExtractedText:
    """Text pulled out of a document.

    Attributes:
        text: Extracted text
        kind: "pdf" or "image"
        page_count: Number of pages read (1 for images)
    """
    text: str
    kind: str
    page_count: int


def tesseract_config() -> str:
    """Tesseract options tuned for early-modern print.

    Automatic page segmentation with OSD, preserved inter-word spacing and
    a whitelist limited to Latin letters, digits and common punctuation.
    """
    return (
        "--psm 1 "
        "-c preserve_interword_spaces=1 "
        f"-c {shlex.quote('tessedit_char_whitelist=' + OCR_CHAR_WHITELIST)}"
    )


def _require_file(path: Path) -> None:
    if not path.is_file():
        raise DocumentExtractionError(f"File not found: {path}")


def read_pdf_pages(path: Path) -> list[str]:
    """Return the text of every page of a PDF."""
    _require_file(path)
    try:
        import fitz  # PyMuPDF

        doc = fitz.open(str(path))
    except Exception as exc:
        raise DocumentExtractionError(f"Cannot open PDF {path.name}: {exc}") from exc

    try:
        return [page.get_text() for page in doc]
    except Exception as exc:
        raise DocumentExtractionError(f"Cannot read PDF {path.name}: {exc}") from exc
    finally:
        doc.close()


def read_docx_text(path: Path) -> str:
    """Return paragraph text and table rows of a .docx file, one per line.

    Table cells are joined with " - " so two-column glossary tables parse
    like ``term - translation`` lines.
    """
    _require_file(path)
    try:
        from docx import Document as DocxDocument

        document = DocxDocument(str(path))
        lines = [paragraph.text for paragraph in document.paragraphs]
        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells]
                lines.append(" - ".join(cell for cell in cells if cell))
    except Exception as exc:
        raise DocumentExtractionError(f"Cannot read document {path.name}: {exc}") from exc
    return "\n".join(lines)


def ocr_image(path: Path, language: str = "eng") -> str:
    """Run Tesseract over a scanned image and return the raw text."""
    _require_file(path)
    try:
        import pytesseract
        from PIL import Image

        with Image.open(path) as image:
            return pytesseract.image_to_string(image, lang=language, config=tesseract_config())
    except Exception as exc:
        raise DocumentExtractionError(f"OCR failed for {path.name}: {exc}") from exc


def extract_document_text(
    path: str | Path,
    document_type: str | None = None,
    ocr_language: str = "eng",
) -> ExtractedText:
    """Extract text from a PDF or a scanned image.

    Image text goes through OCR and then historical-text normalization.

    Args:
        path: File to read
        document_type: One of facsimile, glossary or reference (informational)
        ocr_language: Tesseract language code

    Returns:
        ExtractedText

    Raises:
        UnsupportedFormatError: If the extension is not PDF or image
        DocumentExtractionError: If the reader fails
    """
    path = Path(path)
    ext = path.suffix.lower()
    logger.debug("Extracting %s (%s, type=%s)", path, ext, document_type or "unspecified")

    if ext in PDF_EXTENSIONS:
        pages = read_pdf_pages(path)
        return ExtractedText(text="\n\n".join(pages), kind="pdf", page_count=len(pages))

    if ext in IMAGE_EXTENSIONS:
        raw = ocr_image(path, language=ocr_language)
        return ExtractedText(text=normalize_historical_text(raw), kind="image", page_count=1)

    raise UnsupportedFormatError(f"Unsupported file format: {ext or '(none)'}")


def extract_glossary_text(path: str | Path) -> str:
    """Extract raw glossary text from a Word, PDF or plain-text file.

    Raises:
        UnsupportedFormatError: If the extension has no glossary reader
        DocumentExtractionError: If the reader fails
    """
    path = Path(path)
    ext = path.suffix.lower()

    if ext in DOCX_EXTENSIONS:
        return read_docx_text(path)

    if ext in PDF_EXTENSIONS:
        return "\n".join(read_pdf_pages(path))

    if ext in PLAIN_TEXT_EXTENSIONS:
        _require_file(path)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentExtractionError(f"Cannot read {path.name}: {exc}") from exc

    raise UnsupportedFormatError(f"Unsupported glossary format: {ext or '(none)'}")
