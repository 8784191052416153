import logging
from typing import List

from sqlalchemy.orm import Session

from app.db.transaction import transaction_required, transaction_supports
from app.models import Product, Section
from app.schemas.converters import to_product_dto
from app.schemas.store import ProductCreate, ProductDTO, ProductUpdate
from app.infrastructure.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class ProductService:

    @staticmethod
    def create(
            product_data: ProductCreate,
            db: Session,
    ) -> ProductDTO:
        """
        创建商品

        sectionId 可为空；提供时分区必须存在
        """
        with transaction_required(db):
            product = Product(name=product_data.name, price=product_data.price)

            if product_data.section_id is not None:
                section = db.query(Section).filter(Section.id == product_data.section_id).first()
                if section is None:
                    logger.warning(f"分区不存在: {product_data.section_id}")
                    raise NotFoundError(f"There is no section with the id {product_data.section_id}")
                product.section = section

            db.add(product)
            db.flush()
            logger.info(f"成功创建商品: {product.id}")
            return to_product_dto(product)

    @staticmethod
    def get(
            product_id: int,
            db: Session,
    ) -> ProductDTO:
        with transaction_supports(db):
            return to_product_dto(_get_by_id_or_raise(product_id, db))

    @staticmethod
    def get_all(db: Session) -> List[ProductDTO]:
        with transaction_supports(db):
            return [to_product_dto(product) for product in db.query(Product).order_by(Product.id).all()]

    @staticmethod
    def update(
            product_id: int,
            product_data: ProductUpdate,
            db: Session,
    ) -> ProductDTO:
        with transaction_required(db):
            product = _get_by_id_or_raise(product_id, db)
            if product_data.name is not None:
                product.name = product_data.name
            if product_data.price is not None:
                product.price = product_data.price
            db.flush()
            logger.info(f"成功更新商品: {product_id}")
            return to_product_dto(product)

    @staticmethod
    def delete(
            product_id: int,
            db: Session,
    ) -> None:
        with transaction_required(db):
            db.delete(_get_by_id_or_raise(product_id, db))
            db.flush()
            logger.info(f"成功删除商品: {product_id}")


def _get_by_id_or_raise(product_id: int, db: Session) -> Product:
    product = db.query(Product).filter(Product.id == product_id).first()
    if product is None:
        logger.warning(f"商品不存在: {product_id}")
        raise NotFoundError(f"There is no product with the id {product_id}")
    return product


product_service = ProductService()
