import io
import logging

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from ..exceptions import EmptyDocumentError

logger = logging.getLogger(__name__)


def extract_pdf_text(data: bytes) -> str:
    try:
        reader = PdfReader(io.BytesIO(data))
        pages = [page.extract_text() or "" for page in reader.pages]
    except PdfReadError as e:
        logger.error(f"Could not read PDF: {e}")
        raise EmptyDocumentError("No text found in PDF.") from e
    return "\n".join(pages)
