"""Order repository backed by MySQL."""

from __future__ import annotations

import pymysql

from ordersvc.db import ConnectionPool
from ordersvc.identifiers import CustomerId, OrderId
from ordersvc.order import Order
from ordersvc.records import OrderRecord
from ordersvc.repository import OrderRepository, OrderRepositoryError

_SELECT_BY_ID = """
SELECT id, customer_id, status, total_amount, created_at, updated_at
FROM orders
WHERE id = %s
"""

_SELECT_BY_CUSTOMER = """
SELECT id, customer_id, status, total_amount, created_at, updated_at
FROM orders
WHERE customer_id = %s
"""

_UPSERT = """
INSERT INTO orders (id, customer_id, status, total_amount, created_at, updated_at)
VALUES (%s, %s, %s, %s, NOW(), NOW())
ON DUPLICATE KEY UPDATE
  customer_id = VALUES(customer_id),
  status = VALUES(status),
  total_amount = VALUES(total_amount),
  updated_at = NOW()
"""

_DATABASE_ERRORS = (pymysql.MySQLError, TimeoutError)


class MysqlOrderRepository(OrderRepository):
    """Keeps orders in the ``orders`` table; products are not stored."""

    def __init__(self, pool: ConnectionPool) -> None:
        self.pool = pool

    def find_by_id(self, order_id: OrderId) -> Order | None:
        try:
            with self.pool.connection() as connection, connection.cursor() as cursor:
                cursor.execute(_SELECT_BY_ID, (order_id.value,))
                row = cursor.fetchone()
        except _DATABASE_ERRORS as exc:
            raise OrderRepositoryError("Failed to find order") from exc
        return None if row is None else OrderRecord.from_row(row).to_order()

    def save(self, order: Order) -> None:
        params = (
            order.id.value,
            order.customer_id.value,
            order.status.as_str(),
            order.total_amount(),
        )
        try:
            with self.pool.connection() as connection:
                with connection.cursor() as cursor:
                    cursor.execute(_UPSERT, params)
                connection.commit()
        except _DATABASE_ERRORS as exc:
            raise OrderRepositoryError("Failed to save order") from exc

    def find_by_customer_id(self, customer_id: CustomerId) -> list[Order]:
        try:
            with self.pool.connection() as connection, connection.cursor() as cursor:
                cursor.execute(_SELECT_BY_CUSTOMER, (customer_id.value,))
                rows = cursor.fetchall()
        except _DATABASE_ERRORS as exc:
            raise OrderRepositoryError("Failed to find orders") from exc
        return [OrderRecord.from_row(row).to_order() for row in rows]