# workerhub/schemas/worker_schema.py
from pydantic import BaseModel, Field, AliasChoices, ConfigDict, StrictBool, field_validator
from typing import List, Literal, Optional
from workerhub.schemas.post_schema import PostOut

# 1. 註冊請求 Body
class WorkerRegister(BaseModel):
    name: Optional[str] = Field(None, max_length=100)
    phone: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=100)
    address: Optional[str] = Field(None, max_length=255)
    # 經緯度可不傳，由 Service 回傳明確的錯誤訊息
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)

    @field_validator('category')
    @classmethod
    def normalize_category(cls, v: str) -> str:
        """
        類別去除前後空白並轉小寫，空白字串不接受
        """
        v = v.strip().lower()
        if not v:
            raise ValueError('類別不可為空白')
        return v

# 2. 登入請求 Body
class WorkerLogin(BaseModel):
    phone: str
    password: str

# 3. 更新上線狀態 Body (前端使用 camelCase)
class AvailabilityUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    worker_id: Optional[str] = Field(None, alias="workerId")
    # 必須是 JSON boolean，"true" 字串不接受
    is_available: Optional[StrictBool] = Field(None, alias="isAvailable")


class GeoPoint(BaseModel):
    type: Literal["Point"] = "Point"
    # [longitude, latitude]
    coordinates: List[float]

# 4. 回傳給前端的工作者資料 (不含密碼)
class WorkerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("worker_id", "_id"), serialization_alias="_id")
    name: Optional[str] = None
    phone: str
    address: Optional[str] = None
    category: str
    is_available: bool = Field(validation_alias=AliasChoices("is_available", "isAvailable"), serialization_alias="isAvailable")
    location: GeoPoint
    # 只回傳貼文 ID 列表
    posts: List[str] = Field(default_factory=list, validation_alias=AliasChoices("post_ids", "posts"))

# 5. 搜尋結果：巢狀回傳完整貼文
class WorkerWithPostsOut(WorkerOut):
    posts: List[PostOut] = Field(default_factory=list, validation_alias=AliasChoices("posts"))


class WorkerResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    worker: WorkerOut


class WorkerSearchResponse(BaseModel):
    success: bool = True
    workers: List[WorkerWithPostsOut] = []
