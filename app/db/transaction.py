"""
事务上下文

服务层的每个方法都显式接收 ``Session`` 作为事务上下文：

- ``transaction_required``：写操作。调用方显式开启（``db.begin()``）的事务直接加入，
  否则新开事务，成功提交、异常回滚。
- ``transaction_supports``：读操作。调用方已开启事务时直接加入，
  否则独立执行，结束后关闭隐式开启的只读事务。
"""
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session, SessionTransactionOrigin


def _in_explicit_transaction(db: Session) -> bool:
    transaction = db.get_transaction()
    return transaction is not None and transaction.origin is not SessionTransactionOrigin.AUTOBEGIN


@contextmanager
def transaction_required(db: Session) -> Iterator[Session]:
    if _in_explicit_transaction(db):
        # 加入外层事务，由外层负责提交或回滚
        yield db
        return

    if db.in_transaction():
        # 之前的查询 autobegin 的事务不属于调用方，先结束它
        db.commit()

    with db.begin():
        yield db


@contextmanager
def transaction_supports(db: Session) -> Iterator[Session]:
    ambient = db.in_transaction()
    try:
        yield db
    finally:
        if not ambient and db.in_transaction():
            # 查询时 autobegin 的事务不含写入
            db.rollback()
