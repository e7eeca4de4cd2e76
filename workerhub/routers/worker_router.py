# workerhub/routers/worker_router.py
import logging
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from workerhub.core.database import get_db
from workerhub.services.worker_service import WorkerService
from workerhub.schemas.worker_schema import AvailabilityUpdate, WorkerResponse, WorkerSearchResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Workers"]
)

@router.post("/worker/availability", response_model=WorkerResponse)
async def update_worker_availability(
    availability_data: AvailabilityUpdate,
    db: AsyncSession = Depends(get_db)
):
    """
    更新工作者的上線狀態 (isAvailable 必須是 boolean)
    """
    service = WorkerService(db)
    worker = await service.set_availability(
        worker_id=availability_data.worker_id,
        is_available=availability_data.is_available
    )
    return {"success": True, "message": "Availability updated successfully", "worker": worker}


@router.get("/workers/search", response_model=WorkerSearchResponse)
async def search_workers(
    db: AsyncSession = Depends(get_db),
    # (重要) 定義搜尋的 Query Parameters
    category: Optional[str] = None,
    latitude: Optional[float] = Query(None, ge=-90, le=90),
    longitude: Optional[float] = Query(None, ge=-180, le=180),
    # 單位：公里
    radius: Optional[float] = None
):
    """
    搜尋附近已上線的工作者。

    依類別 (不分大小寫)、上線狀態與半徑 (公里) 篩選，結果依距離由近到遠排序，
    並附上每位工作者的完整貼文。
    """
    logger.info(f"Router received search params - category: {category}, lat: {latitude}, lng: {longitude}, radius: {radius}")

    service = WorkerService(db)
    workers = await service.search_nearby_workers(
        category=category,
        latitude=latitude,
        longitude=longitude,
        radius_km=radius
    )
    return {"success": True, "workers": workers}
