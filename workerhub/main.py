import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from workerhub.core.config import settings
from workerhub.core.database import init_models, close_engine
from workerhub.core.exceptions import AppError
from workerhub.core.storage import get_upload_dir
from workerhub.schemas.common_schema import ErrorResponse
from workerhub.routers import auth_router, worker_router, post_router


# 設定基礎日誌
logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__) # 建立一個 logger 實例


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 啟動：建立資料表
    await init_models()
    logger.info("Database ready")
    yield
    # 關閉：釋放連線池
    await close_engine()
    logger.info("Database connections closed")


app = FastAPI(title="WorkerHub", lifespan=lifespan)

# --- 設定 CORS (跨來源資源共用) ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"], # 允許所有 HTTP 方法
    allow_headers=["*"], # 允許所有 HTTP 標頭
)


# --- 錯誤處理：統一回傳 {success: false, message} ---
@app.exception_handler(AppError)
async def handle_app_error(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=exc.message).model_dump(),
    )


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    # e.g. 未知路由、找不到靜態檔案
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    # 取第一個錯誤組成可讀訊息，e.g. "Invalid input: isAvailable: Input should be a valid boolean"
    errors = exc.errors()
    message = "Invalid input"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path", "form"))
        message = f"Invalid input: {field}: {first.get('msg')}" if field else f"Invalid input: {first.get('msg')}"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(message=message).model_dump(),
    )


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(message="Server error").model_dump(),
    )


# --- 根路徑 ---
@app.get("/")
def read_root():
    return {"success": True, "message": "Backend is running!"}

# --- 上傳的圖片 (唯讀靜態檔案) ---
app.mount(settings.UPLOAD_URL_PREFIX, StaticFiles(directory=get_upload_dir()), name="uploads")

# --- 載入 API 路由 ---
app.include_router(auth_router.router)
app.include_router(worker_router.router)
app.include_router(post_router.router)
