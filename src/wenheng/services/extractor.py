"""Document extraction using PyMuPDF.

PDF text layers are read page by page; image-only PDFs fall back to page
rasterization so the caller still has something to preview.

Author: afu
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import pymupdf

from wenheng.exceptions import ExtractionError
from wenheng.schemas.extraction import (
    ExtractedDocument,
    ExtractionStatus,
    PageImage,
    PageText,
)
from wenheng.utils.text import join_tokens

if TYPE_CHECKING:
    from wenheng.config import Settings

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
TEXT_MIME_TYPE = "text/plain"
_GENERIC_MIME_TYPES = {"", "application/octet-stream", "binary/octet-stream"}
_RENDER_MIME_TYPES = {"png": "image/png", "jpeg": "image/jpeg"}


def classify(mime_type: str | None, filename: str = "") -> str:
    """Map a declared MIME type (and filename as a hint) to pdf|image|text|unsupported."""
    mime = (mime_type or "").split(";", 1)[0].strip().lower()
    name = filename.lower()

    if mime == PDF_MIME_TYPE:
        return "pdf"
    if mime.startswith("image/"):
        return "image"
    if mime == TEXT_MIME_TYPE:
        return "text"
    if mime in _GENERIC_MIME_TYPES:
        if name.endswith(".pdf"):
            return "pdf"
        if name.endswith(".txt"):
            return "text"
    return "unsupported"


class ExtractorService:
    """Turns uploaded essay/topic documents into page text or preview images."""

    def __init__(self, settings: Settings) -> None:
        self._zoom = settings.render_zoom
        self._render_format = settings.render_format
        # MuPDF is not thread-safe; one document at a time across worker threads
        self._lock = asyncio.Lock()

    async def extract(
        self,
        document: bytes,
        mime_type: str | None,
        filename: str = "",
    ) -> ExtractedDocument:
        """Extract a document. Never raises; failures come back as status=failed."""
        kind = classify(mime_type, filename)

        if kind == "image":
            logger.info("Image upload passed through (%s, %d bytes)", mime_type, len(document))
            return ExtractedDocument(
                status=ExtractionStatus.IMAGE,
                images=[PageImage(page=1, mime_type=mime_type or "image/*", data=document)],
            )

        if kind == "text":
            return self._extract_plain_text(document)

        if kind == "unsupported":
            logger.info("Unsupported document format: %s (%s)", mime_type, filename)
            return ExtractedDocument.empty(ExtractionStatus.UNSUPPORTED)

        try:
            async with self._lock:
                return await asyncio.to_thread(self._extract_pdf, document)
        except Exception as e:
            logger.warning("PDF extraction failed for %s: %s", filename or "<upload>", e)
            return ExtractedDocument.empty(ExtractionStatus.FAILED)

    # ------------------------------------------------------------------ #
    #  PDF
    # ------------------------------------------------------------------ #

    def _extract_pdf(self, data: bytes) -> ExtractedDocument:
        """Synchronous -- call via to_thread."""
        try:
            doc = pymupdf.open(stream=data, filetype="pdf")
        except Exception as e:
            raise ExtractionError(f"Cannot open PDF: {e}") from e

        try:
            if doc.page_count == 0:
                raise ExtractionError("PDF has no pages")

            pages = [
                PageText(page=index + 1, text=self._page_text(page))
                for index, page in enumerate(doc)
            ]
            if any(p.text.strip() for p in pages):
                logger.info(
                    "PDF text extracted: %d pages, %d chars",
                    len(pages),
                    sum(len(p.text) for p in pages),
                )
                return ExtractedDocument(status=ExtractionStatus.TEXT, pages=pages)

            # 无文字层（扫描件），改为渲染页面图片
            images = self._render_pages(doc)
            logger.info("PDF has no text layer, rendered %d pages", len(images))
            return ExtractedDocument(status=ExtractionStatus.RASTERIZED, images=images)
        finally:
            doc.close()

    @staticmethod
    def _page_text(page: pymupdf.Page) -> str:
        words = page.get_text("words")
        return join_tokens([w[4] for w in words])

    def _render_pages(self, doc: pymupdf.Document) -> list[PageImage]:
        matrix = pymupdf.Matrix(self._zoom, self._zoom)
        images: list[PageImage] = []
        for index, page in enumerate(doc):
            pix = page.get_pixmap(matrix=matrix)
            images.append(
                PageImage(
                    page=index + 1,
                    mime_type=_RENDER_MIME_TYPES[self._render_format],
                    data=pix.tobytes(self._render_format),
                )
            )
        return images

    # ------------------------------------------------------------------ #
    #  Plain text
    # ------------------------------------------------------------------ #

    @staticmethod
    def _extract_plain_text(data: bytes) -> ExtractedDocument:
        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            logger.warning("Text upload is not valid UTF-8: %s", e)
            return ExtractedDocument.empty(ExtractionStatus.FAILED)
        if not text.strip():
            return ExtractedDocument(
                status=ExtractionStatus.EMPTY, pages=[PageText(page=1, text=text)]
            )
        return ExtractedDocument(
            status=ExtractionStatus.TEXT, pages=[PageText(page=1, text=text)]
        )
