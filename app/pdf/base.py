from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import PurePath

from app.pdf.exceptions import PdfRenderError
from app.processor.models import SourceFile


@dataclass(frozen=True)
class ConversionResult:
    """Rendered preview, or the reason no preview could be produced."""

    artifact: SourceFile | None
    error: str | None = None


class BasePreviewRenderer(ABC):
    """Contract for all PDF preview rendering adapters."""

    def __init__(self, scale: float = 4.0) -> None:
        if scale <= 0:
            raise ValueError(f"Preview scale must be positive, got {scale}")
        self._scale = scale

    def convert(self, file: SourceFile) -> ConversionResult:
        """Render the first page of a PDF as a PNG preview.

        Never raises for bad input; failures come back as a result with
        ``artifact=None`` and an error message.
        """
        try:
            png_bytes = self.render_first_page(file.content)
        except PdfRenderError as exc:
            return ConversionResult(artifact=None, error=str(exc))
        preview = SourceFile(
            name=f"{PurePath(file.name).stem or 'preview'}.png",
            content=png_bytes,
            mime_type="image/png",
        )
        return ConversionResult(artifact=preview)

    @abstractmethod
    def render_first_page(self, pdf_bytes: bytes) -> bytes:
        """Render page one of the PDF to PNG bytes.

        Raises:
            PdfRenderError: if the document cannot be opened or has no pages.
        """
