import pymupdf

from app.pdf.base import BasePreviewRenderer
from app.pdf.exceptions import PdfRenderError


class PyMuPdfRenderer(BasePreviewRenderer):
    """Renders PDF previews using PyMuPDF."""

    def render_first_page(self, pdf_bytes: bytes) -> bytes:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.page_count == 0:
                    raise PdfRenderError("PDF has no pages")
                matrix = pymupdf.Matrix(self._scale, self._scale)
                pixmap = doc[0].get_pixmap(matrix=matrix)
                return pixmap.tobytes("png")
        except PdfRenderError:
            raise
        except Exception as exc:
            raise PdfRenderError(f"pymupdf rendering failed: {exc}") from exc
