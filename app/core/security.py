"""
HTTP Basic 认证

所有 API 路由共用同一组账号密码（settings.API_USERNAME / settings.API_PASSWORD）。
"""
import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from app.core.config import settings

security = HTTPBasic(auto_error=False)


def verify_credentials(credentials: HTTPBasicCredentials = Depends(security)) -> str:
    """
    校验 Basic 认证信息，成功时返回用户名

    缺少或错误的认证信息返回 401，并携带 WWW-Authenticate 头
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Basic"},
        )

    # 常量时间比较，避免时序攻击
    username_ok = secrets.compare_digest(
        credentials.username.encode("utf-8"), settings.API_USERNAME.encode("utf-8")
    )
    password_ok = secrets.compare_digest(
        credentials.password.encode("utf-8"), settings.API_PASSWORD.encode("utf-8")
    )
    if not (username_ok and password_ok):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username
