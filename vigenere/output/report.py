"""
Vigenere Report Generator
==========================

Writes analysis results as machine-readable JSON documents with a small
metadata header, suitable for scripting and later comparison of runs.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from vigenere import __version__


class VigenereReportGenerator:
    """Serialise result models to JSON.

    Usage::

        reporter = VigenereReportGenerator()
        reporter.generate_json(smash_result, Path("smash.json"), kind="smash")
    """

    def build(self, result: BaseModel, kind: str) -> dict[str, Any]:
        """Return the report document for *result* as a plain dictionary.

        Undefined (infinite) scores become ``null`` so the document stays
        strict JSON.
        """
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": "vigenere",
                "kind": kind,
                "version": __version__,
            },
            "result": json.loads(result.model_dump_json()),
        }

    def to_json(self, result: BaseModel, kind: str) -> str:
        """Render the report document as an indented JSON string."""
        return json.dumps(
            self.build(result, kind),
            indent=2,
            ensure_ascii=False,
            allow_nan=False,
        )

    def generate_json(self, result: BaseModel, output_path: Path, kind: str) -> Path:
        """Write the report to *output_path*, creating parent directories.

        Returns:
            Path to the generated JSON file.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json(result, kind), encoding="utf-8")
        return output_path
