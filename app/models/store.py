from sqlalchemy import Column, ForeignKey, INT, NUMERIC, VARCHAR
from sqlalchemy.orm import relationship

from app.db.base import Base


class Store(Base):
    """
    门店数据库模型

    一个门店包含零个或多个分区，删除门店不会删除其分区
    """
    __tablename__ = "t_store"

    id = Column(INT, primary_key=True, index=True, autoincrement=True)
    name = Column(VARCHAR(255), nullable=False)

    sections = relationship("Section", back_populates="store")

    def __repr__(self) -> str:
        return f"<Store id={self.id} name={self.name!r}>"


class Section(Base):
    """
    分区数据库模型

    分区可以不属于任何门店（store_id 为空）
    """
    __tablename__ = "t_section"

    id = Column(INT, primary_key=True, index=True, autoincrement=True)
    name = Column(VARCHAR(255), nullable=False)
    store_id = Column(INT, ForeignKey("t_store.id"), nullable=True, index=True)

    store = relationship("Store", back_populates="sections")
    products = relationship("Product", back_populates="section", order_by="Product.id")

    def __repr__(self) -> str:
        return f"<Section id={self.id} name={self.name!r} store_id={self.store_id}>"


class Product(Base):
    """
    商品数据库模型
    """
    __tablename__ = "t_product"

    id = Column(INT, primary_key=True, index=True, autoincrement=True)
    name = Column(VARCHAR(255), nullable=False)
    price = Column(NUMERIC(10, 2, asdecimal=False), nullable=False, default=0)  # 对外以浮点数传输
    section_id = Column(INT, ForeignKey("t_section.id"), nullable=True, index=True)

    section = relationship("Section", back_populates="products")

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r} section_id={self.section_id}>"
