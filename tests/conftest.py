import io
from typing import Any

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from app.processor.models import JobContext, SourceFile


def _feedback_section(score: int) -> dict[str, Any]:
    return {
        "score": score,
        "tips": [
            {"type": "good", "tip": "Clear headings", "explanation": "Sections are easy to scan."},
            {"type": "improve", "tip": "Quantify impact", "explanation": "Add numbers to results."},
        ],
    }


@pytest.fixture()
def valid_feedback() -> dict[str, Any]:
    """Feedback object matching the response format in the scoring prompt."""
    return {
        "overallScore": 72,
        "ATS": {
            "score": 68,
            "tips": [{"type": "improve", "tip": "Mirror keywords from the job description"}],
        },
        "toneAndStyle": _feedback_section(75),
        "content": _feedback_section(70),
        "structure": _feedback_section(80),
        "skills": _feedback_section(65),
    }


@pytest.fixture()
def job_context() -> JobContext:
    return JobContext(
        company_name="Acme Corp",
        job_title="Backend Engineer",
        job_description="Build and operate Python services.",
    )


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page resume PDF."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Jane Doe - Backend Engineer")
    c.drawString(72, 700, "Python, PostgreSQL, Docker")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page resume PDF."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Experience")
    c.showPage()
    c.drawString(72, 720, "Education")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_file(sample_pdf_bytes: bytes) -> SourceFile:
    return SourceFile(name="jane_doe.pdf", content=sample_pdf_bytes)
