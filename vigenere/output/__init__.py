"""
Vigenere Output Module
=======================

Console display and JSON report generation for analysis results.
"""

from vigenere.output.console import VigenereConsoleOutput
from vigenere.output.report import VigenereReportGenerator

__all__ = [
    "VigenereConsoleOutput",
    "VigenereReportGenerator",
]
