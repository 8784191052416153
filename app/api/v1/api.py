from fastapi import APIRouter, Depends

from app.api.v1.endpoints import products, sections, stores
from app.core.security import verify_credentials


api_router = APIRouter(dependencies=[Depends(verify_credentials)])

# 包含各模块的路由

api_router.include_router(stores.router, prefix="/store", tags=["门店"])
api_router.include_router(sections.router, prefix="/section", tags=["分区"])
api_router.include_router(products.router, prefix="/product", tags=["商品"])
