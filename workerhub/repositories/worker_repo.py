# workerhub/repositories/worker_repo.py
# 負責與工作者相關的資料庫操作
import logging
from typing import List
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from workerhub.core.exceptions import StorageError, ValidationError
from workerhub.models.worker import Worker
from workerhub.utils.geo import BoundingBox

logger = logging.getLogger(__name__)

class WorkerRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_worker_by_phone(self, phone: str) -> Worker | None:
        """
        透過電話查詢工作者
        """
        stmt = select(Worker).where(Worker.phone == phone)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_worker_by_id(self, worker_id: str) -> Worker | None:
        """
        透過 worker_id 查詢工作者 (posts 會一併載入)
        """
        stmt = select(Worker).where(Worker.worker_id == worker_id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def create_worker(self, worker: Worker) -> Worker:
        """
        新增工作者到資料庫
        """
        try:
            self.db.add(worker)
            await self.db.commit()
            return worker
        except IntegrityError:
            # 同時註冊同一支電話時，由 unique 限制擋下
            await self.db.rollback()
            raise ValidationError("Phone number already registered")
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"建立工作者失敗: {e}", exc_info=True)
            raise StorageError()

    async def update_availability(self, worker: Worker, is_available: bool) -> Worker:
        """
        更新工作者的上線狀態
        """
        try:
            worker.is_available = is_available
            await self.db.commit()
            return worker
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"更新上線狀態失敗: {e}", exc_info=True)
            raise StorageError()

    async def list_available_workers_in_box(self, category: str, box: BoundingBox) -> List[Worker]:
        """
        (搜尋用) 依類別、上線狀態與經緯度範圍預先篩選工作者。
        精確距離與排序由 utils/geo.py 處理。
        """
        stmt = select(Worker).where(
            Worker.category == category,
            Worker.is_available.is_(True),
            Worker.latitude.between(box.min_lat, box.max_lat)
        )

        if box.min_lon is not None:
            stmt = stmt.where(Worker.longitude.between(box.min_lon, box.max_lon))

        result = await self.db.execute(stmt)
        return result.scalars().all()
