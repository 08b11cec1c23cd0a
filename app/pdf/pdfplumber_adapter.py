import io

import pdfplumber

from app.pdf.base import BasePreviewRenderer
from app.pdf.exceptions import PdfRenderError

_POINTS_PER_INCH = 72


class PdfPlumberRenderer(BasePreviewRenderer):
    """Renders PDF previews using pdfplumber's page imaging."""

    def render_first_page(self, pdf_bytes: bytes) -> bytes:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                if not pdf.pages:
                    raise PdfRenderError("PDF has no pages")
                image = pdf.pages[0].to_image(resolution=int(_POINTS_PER_INCH * self._scale))
                buf = io.BytesIO()
                image.save(buf, format="PNG")
            return buf.getvalue()
        except PdfRenderError:
            raise
        except Exception as exc:
            raise PdfRenderError(f"pdfplumber rendering failed: {exc}") from exc
