import logging

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings

logger = logging.getLogger(__name__)

IN_MEMORY_SQLITE_URIS = ("sqlite://", "sqlite:///:memory:")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite默认不检查外键，需要每个连接单独开启
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(uri: str) -> Engine:
    """
    根据数据库URI创建引擎

    SQLite 允许跨线程使用连接（FastAPI 在线程池中执行同步接口），
    内存库使用 StaticPool 保证所有会话共享同一个连接；
    其他数据库使用连接池并在取用前检测连接。
    """
    if uri.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if uri in IN_MEMORY_SQLITE_URIS:
            kwargs["poolclass"] = StaticPool
        sqlite_engine = create_engine(uri, echo=settings.DB_ECHO, **kwargs)
        event.listen(sqlite_engine, "connect", _enable_sqlite_foreign_keys)
        return sqlite_engine

    return create_engine(
        uri,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
        pool_recycle=3600,
        echo=settings.DB_ECHO
    )


# 创建数据库引擎
engine = build_engine(settings.SQLALCHEMY_DATABASE_URI)

# 创建数据库会话
SessionLocal = sessionmaker(autoflush=False, bind=engine)

# 创建基本模型类
Base = declarative_base()


def _create_mysql_database() -> None:
    """MySQL 库不存在时先建库"""
    server_uri = settings.SQLALCHEMY_DATABASE_URI.rsplit('/', 1)[0]
    db_name = settings.DB_NAME

    temp_engine = create_engine(server_uri)
    try:
        with temp_engine.connect() as connection:
            result = connection.execute(text("SHOW DATABASES LIKE :name"), {"name": db_name})
            if not result.fetchone():
                connection.execute(text(f"CREATE DATABASE `{db_name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"))
                logger.info(f"数据库 {db_name} 已创建")
            else:
                logger.info(f"数据库 {db_name} 已存在")
    finally:
        temp_engine.dispose()


# 创建数据库和表
def init_db():
    """
    初始化数据库，如果表不存在则创建
    """
    if not settings.CREATE_TABLES:
        logger.info("自动创建表功能已禁用")
        return

    # 注册模型，保证 metadata 中包含所有表
    import app.models  # noqa: F401

    if engine.dialect.name == "mysql":
        _create_mysql_database()

    Base.metadata.create_all(bind=engine)
    logger.info("所有表已创建或已存在")
