# workerhub/core/storage.py
# 貼文圖片的本機檔案儲存 (寫入 / 刪除)
import logging
import os
import uuid
from pathlib import Path

import aiofiles
import aiofiles.os
from fastapi import UploadFile

from workerhub.core.config import settings
from workerhub.core.exceptions import StorageError, ValidationError

logger = logging.getLogger(__name__)


def get_upload_dir() -> Path:
    upload_dir = Path(settings.UPLOAD_DIR)
    os.makedirs(upload_dir, exist_ok=True)
    return upload_dir


def _reference_for(filename: str) -> str:
    # e.g. "uploads/3f2c...png"，對應 main.py 掛載的靜態路徑
    return f"{settings.UPLOAD_URL_PREFIX.strip('/')}/{filename}"


def resolve_reference(image_ref: str) -> Path:
    """將 Post.image 的參照字串轉回實際檔案路徑"""
    # 只取檔名，避免參照字串指到上傳目錄以外
    return get_upload_dir() / Path(image_ref).name


async def save_upload_file(file: UploadFile) -> str:
    """
    將上傳的圖片寫入上傳目錄，回傳存入 Post 的參照字串。
    """
    if not (file.content_type or "").startswith("image/"):
        raise ValidationError("Only image uploads are supported")

    file_extension = Path(file.filename or "").suffix.lower()
    filename = f"{uuid.uuid4().hex}{file_extension}"
    file_path = get_upload_dir() / filename
    try:
        async with aiofiles.open(file_path, 'wb') as f:
            content = await file.read()
            await f.write(content)
    except OSError as e:
        logger.error(f"檔案儲存失敗 {file_path}: {e}", exc_info=True)
        raise StorageError()

    logger.info(f"Saved upload {filename} ({len(content)} bytes)")
    return _reference_for(filename)


async def remove_upload_file(image_ref: str) -> bool:
    """
    盡力刪除圖片檔案；失敗只寫 log，不往外拋。
    """
    file_path = resolve_reference(image_ref)
    try:
        await aiofiles.os.remove(file_path)
    except OSError as e:
        logger.warning(f"Failed to remove upload {file_path}: {e}")
        return False
    return True
