from app.config.settings import Settings
from app.pdf.base import BasePreviewRenderer
from app.pdf.pdfplumber_adapter import PdfPlumberRenderer
from app.pdf.pymupdf_adapter import PyMuPdfRenderer


class PreviewRendererFactory:
    """Creates the correct preview renderer based on settings."""

    ADAPTERS: dict[str, type[BasePreviewRenderer]] = {
        "pdfplumber": PdfPlumberRenderer,
        "pymupdf": PyMuPdfRenderer,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePreviewRenderer:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls(scale=settings.preview_scale)
