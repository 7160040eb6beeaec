import mimetypes
from pathlib import Path

from docintel.ocr.models import DocumentFile


def load_document_file(path: Path) -> DocumentFile:
    """Read a file from disk into a DocumentFile, guessing its MIME type.

    Raises:
        FileNotFoundError: if the file does not exist.
    """
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    mime_type, _ = mimetypes.guess_type(path.name)
    return DocumentFile(
        name=path.name,
        content=path.read_bytes(),
        mime_type=mime_type or "application/octet-stream",
    )
