"""
门店相关API接口模块
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.infrastructure.response import success_response
from app.schemas.store import StoreCreate
from app.services.core.store_service import store_service

router = APIRouter()


# 创建门店接口
@router.post("")
def create_store(
        store_data: StoreCreate,
        db: Session = Depends(get_db),
):
    store = store_service.create(store_data, db)
    return success_response(data=store.to_response(), msg="创建门店成功")


# 获取门店列表接口
@router.get("")
def get_stores(
        db: Session = Depends(get_db),
):
    stores = store_service.get_all(db)
    return success_response(data=[store.to_response() for store in stores], msg="获取门店列表成功")


# 获取门店详情接口
@router.get("/{store_id}")
def get_store(
        store_id: int,
        db: Session = Depends(get_db),
):
    store = store_service.get(store_id, db)
    return success_response(data=store.to_response(), msg="获取门店详情成功")


# 删除门店接口
@router.delete("/{store_id}")
def delete_store(
        store_id: int,
        db: Session = Depends(get_db),
):
    """删除门店，所属分区保留且 storeId 置空"""
    store_service.delete(store_id, db)
    return success_response(msg="删除门店成功")
