import os
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
env_path = os.path.join(project_root, '.env')
load_dotenv(env_path)


class Settings(BaseSettings):
    # 基本设置
    API_V1_STR: str = "/api"
    PROJECT_NAME: str = "Store Reference API"
    VERSION: str = "0.1.0"

    # Basic认证
    API_USERNAME: str = "user"
    API_PASSWORD: str = "password"

    # 数据库设置
    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_USER: str = "root"
    DB_PASSWORD: str = "password"
    DB_NAME: str = os.getenv("DB_NAME", "store_reference")
    DB_ECHO: bool = False

    # 默认使用本地SQLite文件，置空后使用MySQL
    DATABASE_URI: Optional[str] = "sqlite:///./store.db"

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """
        获取数据库URI
        """
        if self.DATABASE_URI:
            return self.DATABASE_URI

        return f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # 是否自动创建数据库表结构
    CREATE_TABLES: bool = True

    # 日志
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # 服务器启动配置
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    RELOAD: bool = True

    class Config:
        case_sensitive = True
        env_file = ".env"


# 创建设置实例
settings = Settings()
