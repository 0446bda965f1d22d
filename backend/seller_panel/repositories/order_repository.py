"""
Order Repository - Data Access Layer for Orders

A seller only sees orders containing at least one of its line items, and
only its own items within them.

Author: Amzify Team
Date: 2025-11-03
"""
from collections import defaultdict
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from seller_panel.core.database import get_db_connection_dict
from seller_panel.domain.order import Order, OrderItem


class OrderRepository:
    """
    Repository for Order data access, always scoped to one seller
    """

    _ORDER_COLUMNS = """
        o.id, o.order_number, o.status, o.total_amount, o.payment_method,
        o.shipping_address, o.tracking_number, o.carrier,
        o.customer_id,
        TRIM(CONCAT(u.first_name, ' ', u.last_name)) AS customer_name,
        u.email AS customer_email,
        o.created_at, o.updated_at
    """

    _SELLER_ORDER_FILTER = """
        EXISTS (
            SELECT 1 FROM order_items soi
            WHERE soi.order_id = o.id AND soi.seller_id = %s
        )
    """

    @staticmethod
    def _fetch_items(cursor, order_ids: Sequence[str], seller_id: str) -> Dict[str, List[OrderItem]]:
        """Load the seller's items for a batch of orders, keyed by order id"""
        items: Dict[str, List[OrderItem]] = defaultdict(list)
        if not order_ids:
            return items

        cursor.execute("""
            SELECT id, order_id, product_id, seller_id, product_name,
                   quantity, unit_price, total_price
            FROM order_items
            WHERE order_id = ANY(%s::uuid[]) AND seller_id = %s
            ORDER BY created_at
        """, (list(order_ids), seller_id))

        for row in cursor.fetchall():
            items[row['order_id']].append(OrderItem(**row))
        return items

    def _map_orders(self, cursor, rows: List[dict], seller_id: str) -> List[Order]:
        items = self._fetch_items(cursor, [row['id'] for row in rows], seller_id)
        return [Order(**row, items=items.get(row['id'], [])) for row in rows]

    def find_by_seller(
        self,
        seller_id: str,
        status: Optional[str] = None,
        statuses: Optional[Sequence[str]] = None,
        limit: int = 50,
        offset: int = 0,
        order_by: str = "o.created_at DESC"
    ) -> Tuple[List[Order], int]:
        """
        Find orders that contain the seller's items

        Args:
            seller_id: Seller user id
            status: Single status filter
            statuses: Several statuses (OR)
            limit / offset: Pagination
            order_by: Internal ORDER BY clause (never user input)

        Returns:
            Tuple of (orders with the seller's items, total count)
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            conditions = [self._SELLER_ORDER_FILTER]
            params: List[Any] = [seller_id]

            if status:
                conditions.append("o.status = %s")
                params.append(status)

            if statuses:
                conditions.append("o.status = ANY(%s)")
                params.append(list(statuses))

            where_clause = " AND ".join(conditions)

            cursor.execute(f"""
                SELECT COUNT(*) AS total
                FROM orders o
                WHERE {where_clause}
            """, params)
            total = cursor.fetchone()['total']

            cursor.execute(f"""
                SELECT {self._ORDER_COLUMNS}
                FROM orders o
                JOIN users u ON u.id = o.customer_id
                WHERE {where_clause}
                ORDER BY {order_by}
                LIMIT %s OFFSET %s
            """, params + [limit, offset])

            orders = self._map_orders(cursor, cursor.fetchall(), seller_id)
            return orders, total

        finally:
            cursor.close()
            conn.close()

    def find_by_id_for_seller(self, order_id: str, seller_id: str) -> Optional[Order]:
        """Order by id, or None if missing or the seller has no items in it"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {self._ORDER_COLUMNS}
                FROM orders o
                JOIN users u ON u.id = o.customer_id
                WHERE o.id = %s AND {self._SELLER_ORDER_FILTER}
            """, (order_id, seller_id))

            row = cursor.fetchone()
            if not row:
                return None

            return self._map_orders(cursor, [row], seller_id)[0]

        finally:
            cursor.close()
            conn.close()

    def find_by_customer_for_seller(self, customer_id: str, seller_id: str) -> List[Order]:
        """All of a customer's orders with this seller, newest first"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {self._ORDER_COLUMNS}
                FROM orders o
                JOIN users u ON u.id = o.customer_id
                WHERE o.customer_id = %s AND {self._SELLER_ORDER_FILTER}
                ORDER BY o.created_at DESC
            """, (customer_id, seller_id))

            return self._map_orders(cursor, cursor.fetchall(), seller_id)

        finally:
            cursor.close()
            conn.close()

    def find_recent_items(self, seller_id: str, limit: int) -> List[Dict[str, Any]]:
        """
        Most recent order items of a seller joined with order and customer data

        Rows are newest first; grouping into orders is left to the caller.
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT
                    oi.order_id, oi.product_name, oi.quantity, oi.unit_price,
                    o.order_number, o.total_amount, o.status, o.created_at,
                    TRIM(CONCAT(u.first_name, ' ', u.last_name)) AS customer_name,
                    u.email AS customer_email
                FROM order_items oi
                JOIN orders o ON o.id = oi.order_id
                JOIN users u ON u.id = o.customer_id
                WHERE oi.seller_id = %s
                ORDER BY oi.created_at DESC
                LIMIT %s
            """, (seller_id, limit))
            return cursor.fetchall()

        finally:
            cursor.close()
            conn.close()

    def update_status(self, order_id: str, status: str) -> Optional[Dict[str, Any]]:
        """
        Set the order status

        Returns:
            {id, order_number, status, updated_at} or None if the order is missing
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                UPDATE orders
                SET status = %s, updated_at = NOW()
                WHERE id = %s
                RETURNING id, order_number, status, updated_at
            """, (status, order_id))
            row = cursor.fetchone()
            conn.commit()
            return row

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def seller_owns_items(self, order_id: str, seller_id: str) -> bool:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(
                "SELECT 1 FROM order_items WHERE order_id = %s AND seller_id = %s LIMIT 1",
                (order_id, seller_id)
            )
            return cursor.fetchone() is not None

        finally:
            cursor.close()
            conn.close()

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def sales_summary(
        self,
        seller_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """
        Revenue and distinct order count from the seller's items in [start, end)

        Returns:
            {'revenue': Decimal, 'orders': int}
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            conditions = ["seller_id = %s"]
            params: List[Any] = [seller_id]

            if start:
                conditions.append("created_at >= %s")
                params.append(start)
            if end:
                conditions.append("created_at < %s")
                params.append(end)

            cursor.execute(f"""
                SELECT
                    COALESCE(SUM(total_price), 0) AS revenue,
                    COUNT(DISTINCT order_id) AS orders
                FROM order_items
                WHERE {' AND '.join(conditions)}
            """, params)
            return cursor.fetchone()

        finally:
            cursor.close()
            conn.close()

    def daily_revenue(self, seller_id: str, start: datetime, end: datetime) -> List[Dict[str, Any]]:
        """Revenue per calendar day in [start, end); days without sales are absent"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT
                    DATE(created_at) AS day,
                    COALESCE(SUM(total_price), 0) AS revenue,
                    COUNT(DISTINCT order_id) AS orders
                FROM order_items
                WHERE seller_id = %s AND created_at >= %s AND created_at < %s
                GROUP BY DATE(created_at)
                ORDER BY day
            """, (seller_id, start, end))
            return cursor.fetchall()

        finally:
            cursor.close()
            conn.close()

    def top_products_between(
        self,
        seller_id: str,
        start: datetime,
        end: datetime,
        limit: int = 5
    ) -> List[Dict[str, Any]]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT
                    product_id, product_name,
                    SUM(quantity) AS units_sold,
                    SUM(total_price) AS revenue
                FROM order_items
                WHERE seller_id = %s AND created_at >= %s AND created_at < %s
                GROUP BY product_id, product_name
                ORDER BY revenue DESC
                LIMIT %s
            """, (seller_id, start, end, limit))
            return cursor.fetchall()

        finally:
            cursor.close()
            conn.close()

    def count_by_status(
        self,
        seller_id: str,
        statuses: Sequence[str],
        updated_since: Optional[datetime] = None
    ) -> int:
        """Count the seller's orders currently in any of the given statuses"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            conditions = [self._SELLER_ORDER_FILTER, "o.status = ANY(%s)"]
            params: List[Any] = [seller_id, list(statuses)]

            if updated_since:
                conditions.append("o.updated_at >= %s")
                params.append(updated_since)

            cursor.execute(f"""
                SELECT COUNT(*) AS total
                FROM orders o
                WHERE {' AND '.join(conditions)}
            """, params)
            return cursor.fetchone()['total']

        finally:
            cursor.close()
            conn.close()

    # ------------------------------------------------------------------
    # Tracking
    # ------------------------------------------------------------------

    def set_tracking(self, order_id: str, tracking_number: str, carrier: str) -> bool:
        """
        Attach a tracking number to an order and log the first tracking event

        Returns:
            False if the order does not exist
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                UPDATE orders
                SET tracking_number = %s, carrier = %s, updated_at = NOW()
                WHERE id = %s
                RETURNING id
            """, (tracking_number, carrier, order_id))

            if not cursor.fetchone():
                conn.rollback()
                return False

            cursor.execute("""
                INSERT INTO order_tracking (order_id, status, description)
                VALUES (%s, 'processing', 'Order is being prepared for shipment')
            """, (order_id,))
            conn.commit()
            return True

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()
