import logging
import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from passlib.context import CryptContext

import config

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
security = HTTPBasic(auto_error=False)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


if not config.ADMIN_PASSWORD:
    logger.warning("ADMIN_PASSWORD is not set, falling back to the default admin password")
ADMIN_PASSWORD_HASH = hash_password(config.ADMIN_PASSWORD or config.DEFAULT_ADMIN_PASSWORD)


def verify_admin(username: str, password: str) -> bool:
    username_ok = secrets.compare_digest(username.encode("utf-8"), config.ADMIN_USERNAME.encode("utf-8"))
    password_ok = pwd_context.verify(password, ADMIN_PASSWORD_HASH)
    return username_ok and password_ok


def require_admin(credentials: HTTPBasicCredentials = Depends(security)) -> str:
    if credentials is None or not verify_admin(credentials.username, credentials.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username
