from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import sys
import traceback

from app.api.v1.api import api_router
from app.api import web
from app.core.config import settings
from app.db.base import init_db
from app.infrastructure.response import (
    standard_response,
    error_response,
    not_found_response,
    server_error_response,
)
from app.infrastructure.exceptions import NotFoundError

# 配置日志
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="门店、分区、商品 CRUD 示例API"
)

# 配置CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """按ID查找失败属于客户端错误"""
    return JSONResponse(content=not_found_response(str(exc)), status_code=400)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """将框架抛出的HTTP错误包装为统一格式，保留状态码与响应头"""
    return JSONResponse(
        content=error_response(msg=str(exc.detail), code=exc.status_code),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """请求参数校验失败，包装为统一格式"""
    return JSONResponse(
        content=error_response(msg="请求参数校验失败", code=422, data=jsonable_encoder(exc.errors())),
        status_code=422,
    )


@app.exception_handler(Exception)
async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """未预期的错误（如数据库不可用）按服务器错误处理，不重试"""
    logger.error(f"请求处理失败 {request.method} {request.url.path}: {str(exc)}")
    logger.error(traceback.format_exc())
    return JSONResponse(content=server_error_response(), status_code=500)


# 包含API路由
app.include_router(api_router, prefix=settings.API_V1_STR)
app.include_router(web.router)


@app.on_event("startup")
async def startup_db_client():
    """
    应用启动时初始化数据库
    """
    logger.info("正在初始化数据库...")
    try:
        init_db()
        logger.info("数据库初始化成功")
    except Exception as e:
        logger.error(f"数据库初始化失败: {str(e)}")
        logger.error(traceback.format_exc())
        logger.warning("应用将继续启动，但数据库功能可能不可用")


@app.get("/")
async def root():
    """健康检查接口"""
    return standard_response(
        data={
            "status": "online",
            "version": settings.VERSION
        },
        msg=f"{settings.PROJECT_NAME}服务正在运行"
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
