from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TransferModel(BaseModel):
    """
    传输对象基类

    对外使用驼峰字段名（storeId、sectionId），内部使用下划线字段名
    """
    model_config = ConfigDict(populate_by_name=True)

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True)


class StoreCreate(TransferModel):
    """门店创建请求模型"""
    name: str


class StoreDTO(TransferModel):
    """门店传输对象"""
    id: int
    name: str


class SectionCreate(TransferModel):
    """
    分区创建请求模型

    storeId 为空表示分区不属于任何门店
    """
    name: str
    store_id: Optional[int] = Field(default=None, alias="storeId")


class SectionDTO(TransferModel):
    """
    分区传输对象

    只携带门店ID，不嵌套门店或商品结构
    """
    id: int
    name: str
    store_id: Optional[int] = Field(default=None, alias="storeId")


class ProductCreate(TransferModel):
    """商品创建请求模型"""
    name: str
    price: float = 0
    section_id: Optional[int] = Field(default=None, alias="sectionId")


class ProductUpdate(TransferModel):
    """商品更新请求模型，未提供的字段保持不变"""
    name: Optional[str] = None
    price: Optional[float] = None


class ProductDTO(TransferModel):
    """商品传输对象"""
    id: int
    name: str
    price: float
    section_id: Optional[int] = Field(default=None, alias="sectionId")
