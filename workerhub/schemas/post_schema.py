# workerhub/schemas/post_schema.py
from pydantic import BaseModel, Field, AliasChoices, ConfigDict, field_validator
from typing import List, Optional
from datetime import datetime, timezone

# 回傳給前端的貼文資料 (Output)
class PostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("post_id", "_id"), serialization_alias="_id")
    worker_id: str = Field(validation_alias=AliasChoices("worker_id", "workerId"), serialization_alias="workerId")
    text: Optional[str] = None
    image: Optional[str] = None
    created_at: datetime = Field(validation_alias=AliasChoices("created_at", "createdAt"), serialization_alias="createdAt")

    @field_validator('created_at')
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """
        SQLite 讀回的時間不帶時區；寫入時一律是 UTC，補上時區資訊
        """
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

# GET /get-posts/{workerId}
class PostListResponse(BaseModel):
    success: bool = True
    posts: List[PostOut] = []
