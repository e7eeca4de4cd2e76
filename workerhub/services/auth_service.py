# workerhub/services/auth_service.py
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from workerhub.repositories.worker_repo import WorkerRepository
from workerhub.core.security import verify_password, get_password_hash
from workerhub.core.exceptions import AuthenticationError, ValidationError
from workerhub.models.worker import Worker
from workerhub.schemas.worker_schema import WorkerRegister

logger = logging.getLogger(__name__)

class AuthService:
    def __init__(self, db: AsyncSession):
        self.worker_repo = WorkerRepository(db)

    async def register_worker(self, worker_create: WorkerRegister) -> Worker:
        """
        處理工作者註冊
        """
        # 1. 檢查電話是否已被註冊
        existing_worker = await self.worker_repo.get_worker_by_phone(worker_create.phone)
        if existing_worker:
            raise ValidationError("Phone number already registered")

        # 2. 位置為必填
        if worker_create.latitude is None or worker_create.longitude is None:
            raise ValidationError(
                "Location data (latitude and longitude) is required for registration."
            )

        # 3. 雜湊密碼 (使用 security.py 中的函式)
        hashed_password = get_password_hash(worker_create.password)

        # 4. 建立 Worker ORM 模型
        new_worker = Worker(
            name=worker_create.name,
            phone=worker_create.phone,
            password_hash=hashed_password,
            category=worker_create.category.strip().lower(),
            address=worker_create.address,
            latitude=worker_create.latitude,
            longitude=worker_create.longitude,
            is_available=False, # 註冊後預設為未上線
        )

        # 5. 呼叫 Repository 儲存到資料庫
        created_worker = await self.worker_repo.create_worker(new_worker)
        logger.info(f"Worker registered: {created_worker.worker_id}")
        return created_worker

    async def authenticate_worker(self, phone: str, password: str) -> Worker:
        """
        驗證工作者電話與密碼。
        查無電話與密碼錯誤回傳同一種錯誤，避免帳號被列舉。
        """
        worker = await self.worker_repo.get_worker_by_phone(phone)

        if not worker or not verify_password(plain_password=password, hashed_password=worker.password_hash):
            raise AuthenticationError("Invalid phone or password")

        return worker
