"""Output generation for compensation results (PDF, text)."""

from oncallcalc.output.pdf_generator import PDFGenerator
from oncallcalc.output.report_generator import ReportGenerator

__all__ = [
    "PDFGenerator",
    "ReportGenerator",
]
