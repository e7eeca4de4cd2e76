# workerhub/repositories/post_repo.py

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from typing import List
import logging

from workerhub.core.exceptions import StorageError
from workerhub.models.post import Post
from workerhub.models.worker import Worker

logger = logging.getLogger(__name__)

class PostRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def add_post_to_worker(self, worker: Worker, post: Post) -> Post:
        """
        新增貼文並加入工作者的貼文列表 (同一個 transaction)
        """
        try:
            # 透過 relationship 加入，posts.worker_id 會一併設定
            worker.posts.append(post)
            await self.db.flush()
            await self.db.refresh(post)
            await self.db.commit()
            return post

        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"建立貼文失敗: {e}", exc_info=True)
            raise StorageError()

    async def get_post_by_id(self, post_id: str) -> Post | None:
        stmt = select(Post).where(Post.post_id == post_id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def list_posts_by_worker(self, worker_id: str) -> List[Post]:
        """
        獲取某位工作者的所有貼文 (依時間降序排列)
        """
        stmt = (
            select(Post)
            .where(Post.worker_id == worker_id)
            .order_by(Post.created_at.desc(), Post.post_id.desc())
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def delete_post(self, post: Post) -> None:
        """
        刪除貼文；工作者的貼文列表由 posts.worker_id 推導，同步移除
        """
        try:
            await self.db.delete(post)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"刪除貼文失敗: {e}", exc_info=True)
            raise StorageError()
