from __future__ import annotations

import logging
from html.parser import HTMLParser
from pathlib import Path


logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {
    ".md",
    ".txt",
    ".html",
    ".htm",
}


class DocumentParseError(RuntimeError):
    pass


class UnsupportedDocumentType(DocumentParseError):
    pass


class _HTMLTextExtractor(HTMLParser):
    def __init__(self) -> None:
        super().__init__()
        self._chunks: list[str] = []
        self._skip_depth = 0

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in {"script", "style"}:
            self._skip_depth += 1

    def handle_endtag(self, tag: str) -> None:
        if tag in {"script", "style"} and self._skip_depth:
            self._skip_depth -= 1

    def handle_data(self, data: str) -> None:
        if self._skip_depth:
            return
        text = data.strip()
        if text:
            self._chunks.append(text)

    def text(self) -> str:
        return "\n".join(self._chunks)


def is_supported_extension(ext: str) -> bool:
    return ext.lower() in SUPPORTED_EXTENSIONS


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def extract_html_text(html: str) -> str:
    parser = _HTMLTextExtractor()
    parser.feed(html)
    parser.close()
    return parser.text()


def read_for_metrics(path: Path) -> tuple[str, str]:
    """Return the measurable text of ``path`` and the kind it was read as."""
    ext = path.suffix.lower()
    if not is_supported_extension(ext):
        raise UnsupportedDocumentType(f"unsupported file type: {ext or 'unknown'}")
    if not path.is_file():
        raise DocumentParseError(f"file not found: {path}")

    raw = _read_text(path)
    kind = ext.lstrip(".")
    if kind in {"html", "htm"}:
        logger.debug("html_extract path=%s", path)
        return extract_html_text(raw), "html"
    return raw, kind
