import logging
from typing import List

from sqlalchemy.orm import Session

from app.db.transaction import transaction_required, transaction_supports
from app.models import Store
from app.schemas.converters import to_store_dto
from app.schemas.store import StoreCreate, StoreDTO
from app.infrastructure.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class StoreService:

    @staticmethod
    def create(
            store_data: StoreCreate,
            db: Session,
    ) -> StoreDTO:
        with transaction_required(db):
            store = Store(name=store_data.name)
            db.add(store)
            db.flush()
            logger.info(f"成功创建门店: {store.id}")
            return to_store_dto(store)

    @staticmethod
    def get(
            store_id: int,
            db: Session,
    ) -> StoreDTO:
        with transaction_supports(db):
            return to_store_dto(_get_by_id_or_raise(store_id, db))

    @staticmethod
    def get_all(db: Session) -> List[StoreDTO]:
        with transaction_supports(db):
            return [to_store_dto(store) for store in db.query(Store).order_by(Store.id).all()]

    @staticmethod
    def delete(
            store_id: int,
            db: Session,
    ) -> None:
        """
        删除门店

        所属分区保留，其 store_id 置空
        """
        with transaction_required(db):
            db.delete(_get_by_id_or_raise(store_id, db))
            db.flush()
            logger.info(f"成功删除门店: {store_id}")


def _get_by_id_or_raise(store_id: int, db: Session) -> Store:
    store = db.query(Store).filter(Store.id == store_id).first()
    if store is None:
        logger.warning(f"门店不存在: {store_id}")
        raise NotFoundError(f"There is no store with the id {store_id}")
    return store


store_service = StoreService()
