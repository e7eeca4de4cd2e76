# workerhub/core/security.py
# 負責密碼雜湊與驗證
from passlib.context import CryptContext
from workerhub.core.config import settings

# 密碼雜湊設定 (Bcrypt, 含 salt 與成本係數)
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """驗證明文密碼是否與雜湊值相符"""
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    """產生密碼的雜湊值"""
    return pwd_context.hash(password)
