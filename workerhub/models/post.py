# workerhub/models/post.py
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, TEXT, String, CHAR, ForeignKey, DateTime
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import relationship
from workerhub.core.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    __tablename__ = "posts"

    post_id = Column(CHAR(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    # 關聯到發文的工作者
    worker_id = Column(CHAR(36), ForeignKey("workers.worker_id"), nullable=False, index=True)
    text = Column(TEXT)
    # 圖片參照 (e.g. "uploads/xxxx.png")，沒有圖片時為 NULL
    image = Column(String(500))
    # 由伺服器在建立時填入；MySQL 需指定 fsp=6 才會保留微秒
    # 同一時間的貼文再以 post_id 排序 (見 worker.py 與 post_repo.py)
    created_at = Column(
        DateTime(timezone=True).with_variant(mysql.DATETIME(fsp=6), "mysql"),
        default=_utcnow,
        nullable=False,
        index=True
    )

    # 建立反向關聯
    worker = relationship("Worker", back_populates="posts")
