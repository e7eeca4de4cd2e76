# workerhub/services/post_service.py

from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession
import logging
from typing import List, Optional

from workerhub.core.exceptions import NotFoundError, StorageError, ValidationError
from workerhub.core.storage import save_upload_file, remove_upload_file
from workerhub.models.post import Post
from workerhub.repositories.post_repo import PostRepository
from workerhub.repositories.worker_repo import WorkerRepository

logger = logging.getLogger(__name__)


class PostService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.post_repo = PostRepository(db)
        self.worker_repo = WorkerRepository(db)

    async def create_post(
        self,
        worker_id: str,
        text: Optional[str],
        image: Optional[UploadFile]
    ) -> Post:
        if not worker_id:
            raise ValidationError("Invalid input")

        # 步驟 1: 驗證工作者存在
        worker = await self.worker_repo.get_worker_by_id(worker_id)
        if not worker:
            raise NotFoundError("Worker not found")

        # 步驟 2: 儲存圖片 (沒選檔案時 filename 為空字串)
        image_ref = None
        if image is not None and image.filename:
            image_ref = await save_upload_file(image)

        # 步驟 3: 建立貼文並加入工作者的貼文列表
        new_post = Post(text=text, image=image_ref)
        try:
            created_post = await self.post_repo.add_post_to_worker(worker, new_post)
        except StorageError:
            # 資料沒寫進去，把剛存的檔案清掉
            if image_ref:
                await remove_upload_file(image_ref)
            raise

        logger.info(f"Post {created_post.post_id} created by worker {worker_id}")
        return created_post

    async def list_posts(self, worker_id: str) -> List[Post]:
        return await self.post_repo.list_posts_by_worker(worker_id)

    async def delete_post(self, post_id: str, worker_id: str) -> None:
        post = await self.post_repo.get_post_by_id(post_id)
        # 不屬於該工作者的貼文視同不存在
        if not post or post.worker_id != worker_id:
            raise NotFoundError("Post not found")

        image_ref = post.image
        await self.post_repo.delete_post(post)

        # 檔案刪除失敗只記 log，貼文紀錄已刪除
        if image_ref:
            await remove_upload_file(image_ref)

        logger.info(f"Post {post_id} deleted by worker {worker_id}")
