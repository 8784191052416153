import pytest

from app.infrastructure.exceptions import NotFoundError
from app.schemas.store import ProductCreate, ProductUpdate, SectionCreate, StoreCreate
from app.services.core.product_service import product_service
from app.services.core.section_service import section_service
from app.services.core.store_service import store_service


def test_store_crud(db):
    store = store_service.create(StoreCreate(name="Downtown"), db)

    assert store_service.get(store.id, db).name == "Downtown"
    assert [s.id for s in store_service.get_all(db)] == [store.id]

    store_service.delete(store.id, db)
    with pytest.raises(NotFoundError, match=f"There is no store with the id {store.id}"):
        store_service.get(store.id, db)


def test_product_without_section(db):
    product = product_service.create(ProductCreate(name="Tablet", price=30.5), db)

    assert product.price == 30.5
    assert product.section_id is None
    assert len(product_service.get_all(db)) == 1


def test_product_in_section(db):
    section = section_service.create(SectionCreate(name="Electronics"), db)

    product = product_service.create(ProductCreate(name="Phone", price=199.99, sectionId=section.id), db)

    assert product_service.get(product.id, db).section_id == section.id


def test_product_with_missing_section(db):
    with pytest.raises(NotFoundError, match="There is no section with the id 3"):
        product_service.create(ProductCreate(name="Ghost", price=1, sectionId=3), db)

    assert product_service.get_all(db) == []


def test_product_update_keeps_unset_fields(db):
    product = product_service.create(ProductCreate(name="Tablet", price=30.5), db)

    updated = product_service.update(product.id, ProductUpdate(price=25), db)

    assert updated.name == "Tablet"
    assert updated.price == 25
    assert product_service.get(product.id, db).price == 25


def test_product_delete(db):
    product = product_service.create(ProductCreate(name="Tablet", price=30.5), db)

    product_service.delete(product.id, db)

    with pytest.raises(NotFoundError, match=f"There is no product with the id {product.id}"):
        product_service.delete(product.id, db)
