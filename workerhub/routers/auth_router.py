# workerhub/routers/auth_router.py
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from workerhub.core.database import get_db
from workerhub.services.auth_service import AuthService
from workerhub.schemas.common_schema import MessageResponse
from workerhub.schemas.worker_schema import WorkerLogin, WorkerRegister, WorkerResponse


logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Auth"]    # API 文件分類標籤
)


@router.post("/register", response_model=MessageResponse)
async def register_new_worker(
    worker_data: WorkerRegister, # Request Body 會被 Pydantic 驗證
    db: AsyncSession = Depends(get_db)
):
    """
    註冊新工作者

    - 電話不可重複。
    - 必須提供 latitude 與 longitude。
    """
    auth_service = AuthService(db)

    # 服務層拋出的 AppError 會由 main.py 的 handler 轉成錯誤回應
    await auth_service.register_worker(worker_data)

    return {"success": True, "message": "Registration successful!"}


@router.post("/login", response_model=WorkerResponse)
async def login_worker(
    login_data: WorkerLogin,
    db: AsyncSession = Depends(get_db)
):
    """
    以電話與密碼登入，回傳工作者資料 (不含密碼)
    """
    auth_service = AuthService(db)

    worker = await auth_service.authenticate_worker(
        phone=login_data.phone,
        password=login_data.password
    )

    logger.info(f"Worker logged in: {worker.worker_id}")

    return {"success": True, "message": "Login successful", "worker": worker}
