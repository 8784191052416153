"""测试公共夹具：使用内存SQLite，每个用例重建表结构"""
import base64
import os

# 必须在导入 app 之前设置，引擎在导入时创建
os.environ["DATABASE_URI"] = "sqlite://"
os.environ["CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.db.base import Base, SessionLocal, engine
from app.main import app as fastapi_app
import app.models  # noqa: F401


AUTH_HEADERS = {
    "Authorization": "Basic " + base64.b64encode(b"user:password").decode("ascii")
}


@pytest.fixture
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(tables):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(tables):
    return TestClient(fastapi_app, headers=AUTH_HEADERS)


@pytest.fixture
def anonymous_client(tables):
    return TestClient(fastapi_app)


@pytest.fixture
def server_error_client(tables):
    return TestClient(fastapi_app, headers=AUTH_HEADERS, raise_server_exceptions=False)
