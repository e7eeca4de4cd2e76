# workerhub/services/worker_service.py
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from workerhub.core.exceptions import NotFoundError, ValidationError
from workerhub.models.worker import Worker
from workerhub.repositories.worker_repo import WorkerRepository
from workerhub.utils.geo import bounding_box, rank_by_distance

logger = logging.getLogger(__name__)

class WorkerService:
    def __init__(self, db: AsyncSession):
        self.worker_repo = WorkerRepository(db)

    async def set_availability(self, worker_id: Optional[str], is_available: Optional[bool]) -> Worker:
        """
        更新工作者的上線狀態
        """
        if not worker_id or not isinstance(is_available, bool):
            raise ValidationError("Invalid input")

        worker = await self.worker_repo.get_worker_by_id(worker_id)
        if not worker:
            raise NotFoundError("Worker not found")

        return await self.worker_repo.update_availability(worker, is_available)

    async def search_nearby_workers(
        self,
        category: Optional[str],
        latitude: Optional[float],
        longitude: Optional[float],
        radius_km: Optional[float]
    ) -> List[Worker]:
        """
        搜尋指定類別、已上線、且在半徑 (公里) 內的工作者，依距離由近到遠排序。
        """
        if not category or latitude is None or longitude is None or radius_km is None:
            raise ValidationError("Missing search parameters (category, location, or radius)")

        if radius_km <= 0:
            raise ValidationError("Radius must be greater than 0")

        max_distance_m = radius_km * 1000 # 公里轉公尺

        # 1. 資料庫先以經緯度範圍縮小候選名單
        box = bounding_box(latitude, longitude, max_distance_m)
        candidates = await self.worker_repo.list_available_workers_in_box(
            category.strip().lower(), box
        )

        # 2. 精確距離過濾與排序
        ranked = rank_by_distance(latitude, longitude, candidates, max_distance_m)
        logger.info(
            f"Search category={category!r} radius={radius_km}km: "
            f"{len(candidates)} candidates, {len(ranked)} in range"
        )

        if not ranked:
            raise NotFoundError("No available workers found in this category and radius.")

        return [item["item_object"] for item in ranked]
