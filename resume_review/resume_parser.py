"""Extract plain text from an uploaded resume file.

Supports PDF (via pdftotext or pypdf), DOCX (via stdlib zipfile) and TXT.
The text is handed to the scoring core as-is; no structured parsing is done.
"""
from __future__ import annotations

import re
import shutil
import subprocess
import zipfile
from pathlib import Path
from xml.etree import ElementTree

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from resume_review.errors import InvalidResumeError
from resume_review.log import get_logger

log = get_logger(__name__)

SUPPORTED_SUFFIXES: tuple[str, ...] = (".pdf", ".docx", ".txt")


def extract_text(path: Path) -> str:
    """Return plain text from a PDF, DOCX, or TXT file.

    A PDF that cannot be read yields an empty string so the review degrades
    instead of failing.
    """
    suffix = path.suffix.lower()
    if suffix == ".txt":
        return path.read_text(encoding="utf-8", errors="ignore")
    if suffix == ".docx":
        return _extract_docx(path)
    if suffix == ".pdf":
        return _extract_pdf(path)
    raise InvalidResumeError(f"Unsupported resume format: {suffix or path.name}")


def _fix_spacing(text: str) -> str:
    """Re-insert spaces when PDF extraction merges words together.

    Detects the problem by checking if the space-to-character ratio is
    abnormally low, then applies heuristic space insertion.
    """
    if not text or len(text) < 50:
        return text
    space_ratio = text.count(" ") / len(text)
    if space_ratio > 0.08:
        return text

    log.debug("Low space ratio (%.2f%%) — applying spacing fix", space_ratio * 100)
    fixed = re.sub(r"([a-z])([A-Z])", r"\1 \2", text)
    fixed = re.sub(r"([a-zA-Z])(\d)", r"\1 \2", fixed)
    fixed = re.sub(r"(\d)([a-zA-Z])", r"\1 \2", fixed)
    fixed = re.sub(r"([.!?,;:])([A-Za-z])", r"\1 \2", fixed)
    return fixed


def _extract_pdf(path: Path) -> str:
    # pdftotext keeps word spacing better than pypdf
    if shutil.which("pdftotext"):
        try:
            result = subprocess.run(
                ["pdftotext", "-layout", str(path), "-"],
                capture_output=True,
                text=True,
                timeout=30,
            )
            if result.returncode == 0 and result.stdout.strip():
                return result.stdout
        except subprocess.TimeoutExpired:
            log.warning("pdftotext timed out on %s, falling back to pypdf", path.name)

    try:
        reader = PdfReader(str(path))
        pages = [_fix_spacing(page.extract_text() or "") for page in reader.pages]
    except (PdfReadError, OSError, ValueError) as exc:
        log.error("Error extracting text from PDF %s: %s", path.name, exc)
        return ""
    return "\n".join(pages)


def _extract_docx(path: Path) -> str:
    """Parse DOCX using only stdlib (zipfile + xml)."""
    ns = "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}"
    texts: list[str] = []
    try:
        with zipfile.ZipFile(path) as zf:
            with zf.open("word/document.xml") as f:
                tree = ElementTree.parse(f)
    except (zipfile.BadZipFile, KeyError, ElementTree.ParseError) as exc:
        log.error("Error extracting text from DOCX %s: %s", path.name, exc)
        return ""
    for para in tree.iter(f"{ns}p"):
        parts = [node.text for node in para.iter(f"{ns}t") if node.text]
        if parts:
            texts.append("".join(parts))
    return "\n".join(texts)
