"""Extraction result schemas.

Author: afu
"""

import base64
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# 图片上传不做文字辨识，以此标记代替正文
IMAGE_TEXT_SENTINEL = "[圖片內容，無法分析文字]"


class ExtractionStatus(StrEnum):
    TEXT = "text"
    RASTERIZED = "rasterized"
    IMAGE = "image"
    EMPTY = "empty"
    UNSUPPORTED = "unsupported"
    FAILED = "failed"


class PageText(BaseModel):
    """Text layer of a single page, tokens joined by single spaces."""

    model_config = ConfigDict(frozen=True)

    page: int
    text: str = ""


class PageImage(BaseModel):
    """A displayable image for one page (rendered PDF page or uploaded image)."""

    model_config = ConfigDict(frozen=True)

    page: int
    mime_type: str
    data: bytes


class ExtractedDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: ExtractionStatus
    pages: list[PageText] = Field(default_factory=list)
    images: list[PageImage] = Field(default_factory=list)

    @property
    def text(self) -> str:
        if self.status == ExtractionStatus.IMAGE:
            return IMAGE_TEXT_SENTINEL
        return "\n".join(p.text for p in self.pages)

    @property
    def analyzable(self) -> bool:
        return self.status == ExtractionStatus.TEXT and bool(self.text.strip())

    @classmethod
    def empty(cls, status: ExtractionStatus) -> "ExtractedDocument":
        return cls(status=status)


class PageImageSchema(BaseModel):
    page: int
    mime_type: str
    data_base64: str


class ExtractionResponse(BaseModel):
    status: ExtractionStatus
    text: str
    pages: list[PageText]
    images: list[PageImageSchema]

    @classmethod
    def from_document(cls, doc: ExtractedDocument) -> "ExtractionResponse":
        return cls(
            status=doc.status,
            text=doc.text,
            pages=list(doc.pages),
            images=[
                PageImageSchema(
                    page=img.page,
                    mime_type=img.mime_type,
                    data_base64=base64.b64encode(img.data).decode("ascii"),
                )
                for img in doc.images
            ],
        )
