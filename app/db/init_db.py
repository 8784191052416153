import logging

from app.db.base import Base, engine
import app.models  # noqa: F401


# 创建所有表
def create_tables() -> None:
    Base.metadata.create_all(bind=engine)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_tables()
    logging.info("数据库表已创建")
