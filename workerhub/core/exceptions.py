# workerhub/core/exceptions.py
# 統一的錯誤類型，由 main.py 的 exception handler 轉成 {success: false, message}
from fastapi import status


class AppError(Exception):
    """所有業務錯誤的基底類別"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """輸入缺漏或格式錯誤 (400)"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class AuthenticationError(AppError):
    """帳號或密碼錯誤 (401)，不區分「查無此電話」與「密碼錯誤」"""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid phone or password"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class StorageError(AppError):
    """資料庫或檔案系統寫入失敗 (500)，細節只留在 server log"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"
