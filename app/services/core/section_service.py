import logging
from typing import List

from sqlalchemy.orm import Session

from app.db.transaction import transaction_required, transaction_supports
from app.models import Product, Section, Store
from app.schemas.converters import to_section_dto
from app.schemas.store import SectionCreate, SectionDTO
from app.infrastructure.exceptions import NotFoundError

logger = logging.getLogger(__name__)

GOODIES_SECTION_NAME = "Goodies"
GOODIES_PRODUCT_COUNT = 10


class SectionService:

    @staticmethod
    def create(
            section_data: SectionCreate,
            db: Session,
    ) -> SectionDTO:
        """
        创建分区

        若提供了 storeId，门店必须存在，否则抛出 NotFoundError，且不写入任何数据
        """
        with transaction_required(db):
            section = Section(name=section_data.name)

            if section_data.store_id is not None:
                store = db.query(Store).filter(Store.id == section_data.store_id).first()
                if store is None:
                    logger.warning(f"门店不存在: {section_data.store_id}")
                    raise NotFoundError(f"There is no store with the id {section_data.store_id}")
                section.store = store

            db.add(section)
            # 刷新以获取自动生成的ID
            db.flush()
            logger.info(f"成功创建分区: {section.id}")
            return to_section_dto(section)

    @staticmethod
    def get(
            section_id: int,
            db: Session,
    ) -> SectionDTO:
        with transaction_supports(db):
            return to_section_dto(_get_by_id_or_raise(section_id, db))

    @staticmethod
    def get_all(db: Session) -> List[SectionDTO]:
        with transaction_supports(db):
            sections = db.query(Section).order_by(Section.id).all()
            return [to_section_dto(section) for section in sections]

    @staticmethod
    def delete(
            section_id: int,
            db: Session,
    ) -> None:
        with transaction_required(db):
            section = _get_by_id_or_raise(section_id, db)
            db.delete(section)
            db.flush()
            logger.info(f"成功删除分区: {section_id}")

    @staticmethod
    def create_goodies_section_and_products(db: Session) -> None:
        """
        创建 "Goodies" 分区及其十个商品

        商品名按循环序号生成（"The product with the ID 1" ~ "The product with the ID 10"），
        与数据库分配的ID无关。分区与商品在同一事务内写入，任一失败则全部回滚。
        """
        with transaction_required(db):
            section = Section(name=GOODIES_SECTION_NAME)

            # dict 保持插入顺序，并按对象身份去重
            products = dict.fromkeys(
                Product(name=f"The product with the ID {k}", price=0, section=section)
                for k in range(1, GOODIES_PRODUCT_COUNT + 1)
            )
            section.products = list(products)

            db.add(section)
            db.flush()
            logger.info(f"成功创建 Goodies 分区 {section.id} 及 {len(products)} 个商品")


def _get_by_id_or_raise(section_id: int, db: Session) -> Section:
    section = db.query(Section).filter(Section.id == section_id).first()
    if section is None:
        logger.warning(f"分区不存在: {section_id}")
        raise NotFoundError(f"There is no section with the id {section_id}")
    return section


section_service = SectionService()
