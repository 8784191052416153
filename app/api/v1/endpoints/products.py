"""
商品相关API接口模块

提供商品的增删改查接口
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.infrastructure.response import success_response
from app.schemas.store import ProductCreate, ProductUpdate
from app.services.core.product_service import product_service


router = APIRouter()


# 创建商品接口
@router.post("")
def create_product(
        product_data: ProductCreate,  # 商品创建请求体数据
        db: Session = Depends(get_db),
):
    """
    创建新的商品

    Args:
        product_data (ProductCreate): {"name": str, "price": float, "sectionId": int | null}
        db (Session): 数据库会话对象

    Returns:
        dict: data 为新商品 {"id", "name", "price", "sectionId"}
    """
    product = product_service.create(product_data, db)
    return success_response(data=product.to_response(), msg="创建商品成功")


# 获取商品列表接口
@router.get("")
def get_products(
        db: Session = Depends(get_db),
):
    products = product_service.get_all(db)
    return success_response(data=[product.to_response() for product in products], msg="获取商品列表成功")


# 获取商品详情接口
@router.get("/{product_id}")
def get_product(
        product_id: int,
        db: Session = Depends(get_db),
):
    product = product_service.get(product_id, db)
    return success_response(data=product.to_response(), msg="获取商品详情成功")


# 更新商品接口
@router.put("/{product_id}")
def update_product(
        product_id: int,
        product_data: ProductUpdate,
        db: Session = Depends(get_db),
):
    """
    更新商品名称或价格，未提供的字段保持不变
    """
    product = product_service.update(product_id, product_data, db)
    return success_response(data=product.to_response(), msg="更新商品成功")


# 删除商品接口
@router.delete("/{product_id}")
def delete_product(
        product_id: int,
        db: Session = Depends(get_db),
):
    product_service.delete(product_id, db)
    return success_response(msg="删除商品成功")
