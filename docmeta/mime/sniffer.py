"""Content-based MIME type detection.

Only the leading bytes (and, for ZIP containers, the archive's part names)
are inspected. File extensions are never consulted, so a mislabeled file is
classified by what it actually contains.
"""

import io
import zipfile
from pathlib import Path

from docmeta.processor.exceptions import UnsupportedTypeError

PDF_MIME_TYPE = "application/pdf"
POWERPOINT_MIME_TYPE = (
    "application/vnd.openxmlformats-officedocument.presentationml.presentation"
)
WORD_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
EXCEL_MIME_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
ZIP_MIME_TYPE = "application/zip"
CFB_MIME_TYPE = "application/x-cfb"

_SIGNATURES: list[tuple[bytes, str]] = [
    (b"%PDF", PDF_MIME_TYPE),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"{\\rtf", "application/rtf"),
    (b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1", CFB_MIME_TYPE),
]

_ZIP_SIGNATURES = (b"PK\x03\x04", b"PK\x05\x06")

# Office Open XML packages are told apart by their main document part.
_OOXML_MAIN_PARTS: list[tuple[str, str]] = [
    ("ppt/presentation.xml", POWERPOINT_MIME_TYPE),
    ("word/document.xml", WORD_MIME_TYPE),
    ("xl/workbook.xml", EXCEL_MIME_TYPE),
]


def sniff_mime_type(data: bytes) -> str:
    """Return the MIME type of ``data`` judged from its content.

    Raises:
        UnsupportedTypeError: if the content matches no known signature.
    """
    for signature, mime in _SIGNATURES:
        if data.startswith(signature):
            return mime
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    if data.startswith(_ZIP_SIGNATURES):
        return _sniff_zip_container(data)
    raise UnsupportedTypeError("Unable to resolve MIME type from file content")


def sniff_file(path: Path) -> str:
    """Read ``path`` and return its content-based MIME type."""
    try:
        return sniff_mime_type(path.read_bytes())
    except UnsupportedTypeError as exc:
        raise UnsupportedTypeError(f"Unsupported file type: {path}") from exc


def _sniff_zip_container(data: bytes) -> str:
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            names = set(archive.namelist())
    except zipfile.BadZipFile:
        return ZIP_MIME_TYPE
    for part_name, mime in _OOXML_MAIN_PARTS:
        if part_name in names:
            return mime
    return ZIP_MIME_TYPE
