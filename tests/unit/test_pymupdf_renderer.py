import pytest

from app.pdf.exceptions import PdfRenderError
from app.pdf.pymupdf_adapter import PyMuPdfRenderer
from app.processor.models import SourceFile

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class TestPyMuPdfRenderer:
    def test_renders_png(self, sample_pdf_bytes: bytes) -> None:
        png = PyMuPdfRenderer(scale=1.0).render_first_page(sample_pdf_bytes)
        assert png.startswith(PNG_SIGNATURE)

    def test_renders_multi_page_pdf(self, multi_page_pdf_bytes: bytes) -> None:
        png = PyMuPdfRenderer(scale=1.0).render_first_page(multi_page_pdf_bytes)
        assert png.startswith(PNG_SIGNATURE)

    def test_scale_increases_image_size(self, sample_pdf_bytes: bytes) -> None:
        small = PyMuPdfRenderer(scale=1.0).render_first_page(sample_pdf_bytes)
        large = PyMuPdfRenderer(scale=2.0).render_first_page(sample_pdf_bytes)
        assert len(large) > len(small)

    def test_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(PdfRenderError):
            PyMuPdfRenderer().render_first_page(b"not a pdf")


class TestConvert:
    def test_returns_png_artifact_named_after_original(self, sample_pdf_file: SourceFile) -> None:
        result = PyMuPdfRenderer(scale=1.0).convert(sample_pdf_file)
        assert result.error is None
        assert result.artifact is not None
        assert result.artifact.name == "jane_doe.png"
        assert result.artifact.mime_type == "image/png"
        assert result.artifact.content.startswith(PNG_SIGNATURE)

    def test_invalid_pdf_returns_error_result(self) -> None:
        result = PyMuPdfRenderer().convert(SourceFile(name="broken.pdf", content=b"garbage"))
        assert result.artifact is None
        assert result.error is not None
        assert "pymupdf rendering failed" in result.error

    def test_rejects_non_positive_scale(self) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            PyMuPdfRenderer(scale=0)
