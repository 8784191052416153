"""
分区相关API接口模块

提供分区的增删查接口，以及批量创建 "Goodies" 分区及商品的接口。
接口只负责协议转换，业务规则全部在 SectionService 中实现。
"""
# FastAPI核心组件
from fastapi import APIRouter, Depends
# SQLAlchemy数据库ORM
from sqlalchemy.orm import Session

# 数据库会话管理器
from app.db.session import get_db
# 统一响应格式工具
from app.infrastructure.response import success_response
# 数据传输对象定义
from app.schemas.store import SectionCreate
# 核心业务服务层
from app.services.core.section_service import section_service

# 创建API路由实例
router = APIRouter()


# 创建分区接口
@router.post("")
def create_section(
        section_data: SectionCreate,  # 分区创建请求体数据
        db: Session = Depends(get_db),  # 数据库会话依赖注入
):
    """
    创建新的分区

    Args:
        section_data (SectionCreate): {"name": str, "storeId": int | null}
        db (Session): 数据库会话对象，通过依赖注入自动获取

    Returns:
        dict: 包含新分区信息的成功响应
            {
                "code": 200,
                "msg": "创建分区成功",
                "data": {"id": int, "name": str, "storeId": int | null}
            }

    Raises:
        NotFoundError: storeId 对应的门店不存在，返回400
    """
    section = section_service.create(section_data, db)
    return success_response(data=section.to_response(), msg="创建分区成功")


# 获取分区列表接口
@router.get("")
def get_sections(
        db: Session = Depends(get_db),
):
    """
    获取全部分区，按ID升序
    """
    sections = section_service.get_all(db)
    return success_response(
        data=[section.to_response() for section in sections],
        msg="获取分区列表成功"
    )


# 批量创建 Goodies 分区及商品接口
@router.post("/goodies")
def create_goodies(
        db: Session = Depends(get_db),
):
    """
    创建名为 "Goodies" 的分区及其十个商品，无请求体，成功时 data 为空
    """
    section_service.create_goodies_section_and_products(db)
    return success_response(msg="创建Goodies分区及商品成功")


# 获取分区详情接口
@router.get("/{section_id}")
def get_section(
        section_id: int,  # 分区ID参数，从URL路径中提取
        db: Session = Depends(get_db),
):
    """
    根据ID获取分区详情

    Raises:
        NotFoundError: 分区不存在，返回400
    """
    section = section_service.get(section_id, db)
    return success_response(data=section.to_response(), msg="获取分区详情成功")


# 删除分区接口
@router.delete("/{section_id}")
def delete_section(
        section_id: int,
        db: Session = Depends(get_db),
):
    """
    根据ID删除分区，分区下的商品保留但不再关联该分区
    """
    section_service.delete(section_id, db)
    return success_response(msg="删除分区成功")
