"""PDF rendering of generated resumes."""

import io
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from reportlab.lib.pagesizes import letter
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

logger = logging.getLogger("job_board.resume")


class PdfRenderer(Protocol):
    def render(self, text: str) -> bytes: ...


@dataclass
class RenderResult:
    """Outcome of a render attempt. Failures carry the error text instead of raising."""

    data: bytes = b""
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error and bool(self.data)


class ReportLabPdfRenderer:
    """Plain-text to PDF renderer: one font, wrapped lines, automatic page breaks."""

    def __init__(
        self,
        margin: float = 50,
        font_name: str = "Helvetica",
        font_size: float = 12,
        pagesize: tuple[float, float] = letter,
    ):
        self.margin = margin
        self.font_name = font_name
        self.font_size = font_size
        self.leading = font_size * 1.2
        self.pagesize = pagesize

    def render(self, text: str) -> bytes:
        buffer = io.BytesIO()
        # invariant=1 drops timestamps and random document ids so equal text gives equal bytes
        pdf = canvas.Canvas(buffer, pagesize=self.pagesize, invariant=1)
        width, height = self.pagesize
        max_width = width - 2 * self.margin
        top = height - self.margin - self.font_size

        pdf.setFont(self.font_name, self.font_size)
        y = top
        for raw_line in text.split("\n"):
            stripped = raw_line.lstrip()
            indent = stringWidth(raw_line[: len(raw_line) - len(stripped)], self.font_name, self.font_size)
            wrapped = simpleSplit(stripped, self.font_name, self.font_size, max_width - indent) or [""]
            for line in wrapped:
                if y < self.margin:
                    pdf.showPage()
                    pdf.setFont(self.font_name, self.font_size)
                    y = top
                pdf.drawString(self.margin + indent, y, line)
                y -= self.leading

        pdf.save()
        return buffer.getvalue()


def render_pdf(renderer: Optional[PdfRenderer], text: str) -> RenderResult:
    """Run renderer over text, converting any failure into a failed RenderResult."""
    if renderer is None:
        return RenderResult(error="no PDF renderer configured")
    try:
        data = renderer.render(text)
    except Exception as e:
        logger.warning("PDF rendering failed: %s: %s", type(e).__name__, e)
        return RenderResult(error=f"{type(e).__name__}: {e}")
    if not data:
        return RenderResult(error="renderer produced no output")
    return RenderResult(data=bytes(data))


def create_renderer(pdf_config) -> Optional[ReportLabPdfRenderer]:
    """Build the renderer described by a PdfConfig; None when PDF output is disabled."""
    if not pdf_config.enabled:
        return None
    return ReportLabPdfRenderer(
        margin=pdf_config.margin,
        font_name=pdf_config.font_name,
        font_size=pdf_config.font_size,
    )
