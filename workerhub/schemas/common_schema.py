# workerhub/schemas/common_schema.py
from pydantic import BaseModel

# 只回傳訊息的成功回應
class MessageResponse(BaseModel):
    success: bool = True
    message: str

# 失敗回應的格式 (由 exception handler 產生)
class ErrorResponse(BaseModel):
    success: bool = False
    message: str
