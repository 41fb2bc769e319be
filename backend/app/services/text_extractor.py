import io
import logging
from typing import List, Optional

from pypdf import PdfReader

from backend.app.models.schemas import UploadedFile
from backend.app.services.exceptions import ExtractionError
from backend.app.services.langsmith_logger import traceable

logger = logging.getLogger(__name__)


class PypdfPageSource:
    """Reads PDF bytes with pypdf; one list of text fragments per page, in page order."""

    def extract_pages(self, data: bytes) -> List[List[str]]:
        # strict: a page whose content cannot be resolved fails instead of reading as empty
        reader = PdfReader(io.BytesIO(data), strict=True)
        pages: List[List[str]] = []
        for page in reader.pages:
            fragments: List[str] = []

            def _collect(text, cm, tm, font_dict, font_size, _sink=fragments):
                if text and text.strip():
                    _sink.append(text.strip())

            page.extract_text(visitor_text=_collect)
            pages.append(fragments)
        return pages


def join_pages(pages: List[List[str]]) -> str:
    # Each page contributes its fragments joined by a space, plus a trailing space
    return "".join(" ".join(fragments) + " " for fragments in pages)


class TextExtractor:
    def __init__(self, page_source: Optional[PypdfPageSource] = None):
        self.page_source = page_source or PypdfPageSource()

    @traceable("extract_text", run_type="parser")
    def extract(self, file: UploadedFile) -> str:
        """
        Turn an uploaded PDF into one text blob.

        Raises ExtractionError if the bytes are not a readable PDF or any single
        page fails; the document is never returned partially.
        """
        try:
            pages = self.page_source.extract_pages(bytes(file.data))
        except ExtractionError:
            raise
        except Exception as e:
            logger.error(f"PDF extraction failed for {file.filename!r}: {e}")
            raise ExtractionError(f"Failed to extract text: {e}") from e
        text = join_pages(pages)
        logger.info(f"Extracted {len(pages)} page(s), text_len={len(text)} from {file.filename!r}")
        return text
