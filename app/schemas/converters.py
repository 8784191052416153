"""实体与传输对象之间的转换，纯函数、无副作用"""
from app.models import Product, Section, Store
from app.schemas.store import ProductDTO, SectionDTO, StoreDTO


def to_store_dto(store: Store) -> StoreDTO:
    return StoreDTO(id=store.id, name=store.name)


def to_section_dto(section: Section) -> SectionDTO:
    return SectionDTO(
        id=section.id,
        name=section.name,
        store_id=section.store.id if section.store is not None else None,
    )


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=product.price,
        section_id=product.section.id if product.section is not None else None,
    )
