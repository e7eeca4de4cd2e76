# workerhub/models/worker.py
import uuid
from sqlalchemy import Column, String, Boolean, Float, CHAR
from sqlalchemy.orm import relationship
from workerhub.core.database import Base

class Worker(Base):
    __tablename__ = "workers"

    # 基本欄位
    worker_id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    phone = Column(String(50), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(100))
    address = Column(String(255))
    # 一律存小寫，搜尋時也以小寫比對
    category = Column(String(100), index=True, nullable=False)
    is_available = Column(Boolean, default=False, nullable=False)

    # 位置 (經緯度)，對外以 GeoJSON Point 呈現
    latitude = Column(Float, nullable=False, index=True)
    longitude = Column(Float, nullable=False, index=True)

    # 工作者的貼文列表 (依建立時間由舊到新)
    # 呼應 post.py 中的 'worker'
    posts = relationship(
        "Post",
        back_populates="worker",
        order_by="[Post.created_at, Post.post_id]",
        lazy="selectin"
    )

    @property
    def location(self) -> dict:
        # GeoJSON 座標順序為 [longitude, latitude]
        return {"type": "Point", "coordinates": [self.longitude, self.latitude]}

    @property
    def post_ids(self) -> list[str]:
        return [post.post_id for post in self.posts]
