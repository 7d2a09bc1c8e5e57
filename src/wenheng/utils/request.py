"""请求参数解析工具函数

Author: afu
"""

from fastapi import HTTPException, UploadFile

from wenheng.services.pipeline import UploadedDocument


async def read_upload(file: UploadFile | None, max_bytes: int) -> UploadedDocument | None:
    """读取上传文件

    Args:
        file: 表单中的文件字段，可为空
        max_bytes: 允许的最大字节数

    Returns:
        UploadedDocument，或 None（未选择文件时浏览器会提交空文件名的空文件）

    Raises:
        HTTPException: 文件超过大小限制 (413)
    """
    if file is None:
        return None
    data = await file.read()
    if not data and not file.filename:
        return None
    if len(data) > max_bytes:
        raise HTTPException(status_code=413, detail="File too large")
    return UploadedDocument(
        data=data,
        mime_type=file.content_type,
        filename=file.filename or "",
    )
