# workerhub/routers/post_router.py
from fastapi import APIRouter, Depends, UploadFile, File, Form
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from workerhub.core.database import get_db
from workerhub.services.post_service import PostService
from workerhub.schemas.common_schema import MessageResponse
from workerhub.schemas.post_schema import PostListResponse

router = APIRouter(
    tags=["Posts"]
)

@router.post("/upload-post", response_model=MessageResponse)
async def upload_post(
    # (重要) 由於是檔案上傳，欄位必須來自 Form
    worker_id: Optional[str] = Form(None, alias="workerId"),
    text: Optional[str] = Form(None),
    # 圖片是可選的
    image: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_db)
):
    """
    工作者發布貼文。

    - 必須傳送 form-data。
    - 圖片 (image) 可選，僅接受 image/* 類型。
    """
    service = PostService(db)
    await service.create_post(worker_id=worker_id, text=text, image=image)
    return {"success": True, "message": "Post uploaded successfully"}


@router.get("/get-posts/{worker_id}", response_model=PostListResponse)
async def get_posts_by_worker(
    worker_id: str,
    db: AsyncSession = Depends(get_db)
):
    """
    獲取指定工作者的所有貼文 (新到舊)
    """
    service = PostService(db)
    posts = await service.list_posts(worker_id)
    return {"success": True, "posts": posts}


@router.delete("/delete-post/{post_id}/{worker_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    worker_id: str,
    db: AsyncSession = Depends(get_db)
):
    """
    刪除貼文，並一併移除圖片檔案
    """
    service = PostService(db)
    await service.delete_post(post_id=post_id, worker_id=worker_id)
    return {"success": True, "message": "Post deleted"}
