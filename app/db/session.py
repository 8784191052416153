from typing import Generator

from sqlalchemy.orm import Session

from app.db.base import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    获取数据库会话的依赖函数

    用于FastAPI依赖注入系统，提供数据库会话；
    会话即服务层的事务上下文
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
