"""
Customer Repository - Buyers of a seller's products

Per-customer aggregates are computed over the seller's own order items.

Author: Amzify Team
Date: 2025-11-04
"""
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from seller_panel.core.database import get_db_connection_dict


class CustomerRepository:
    """
    Repository for customer aggregates scoped to one seller
    """

    _BASE_FROM = """
        FROM users u
        INNER JOIN orders o ON o.customer_id = u.id
        INNER JOIN order_items oi ON oi.order_id = o.id
    """

    # Customers are visible to a seller only through orders containing the seller's items
    _BOUGHT_FROM_SELLER = """
        EXISTS (
            SELECT 1
            FROM orders o
            INNER JOIN order_items oi ON oi.order_id = o.id
            WHERE o.customer_id = %s AND oi.seller_id = %s
        )
    """

    @staticmethod
    def _filters(
        seller_id: str,
        search: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None
    ) -> Tuple[str, List[Any]]:
        conditions = ["oi.seller_id = %s", "u.role = 'customer'"]
        params: List[Any] = [seller_id]

        if search:
            conditions.append(
                "(u.email ILIKE %s OR u.first_name ILIKE %s OR u.last_name ILIKE %s OR u.phone ILIKE %s)"
            )
            params.extend([f"%{search}%"] * 4)

        if start_date:
            conditions.append("o.created_at >= %s")
            params.append(start_date)

        if end_date:
            conditions.append("o.created_at <= %s")
            params.append(end_date)

        return " AND ".join(conditions), params

    def find_customer_stats(
        self,
        seller_id: str,
        search: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        limit: Optional[int] = None,
        offset: int = 0,
        repeat_only: bool = False
    ) -> List[Dict[str, Any]]:
        """
        One row per customer with order count, spend and first/last order date

        Args:
            repeat_only: Keep only customers with more than one order

        Returns:
            Rows ordered by total_spent desc (total_orders desc when repeat_only)
        """
        where_clause, params = self._filters(seller_id, search, start_date, end_date)
        having = "HAVING COUNT(DISTINCT o.id) > 1" if repeat_only else ""
        order_by = "total_orders DESC" if repeat_only else "total_spent DESC"

        pagination = ""
        if limit is not None:
            pagination = "LIMIT %s OFFSET %s"
            params = params + [limit, offset]

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT
                    u.id, u.email, u.first_name, u.last_name, u.phone,
                    u.created_at AS joined_at,
                    COUNT(DISTINCT o.id) AS total_orders,
                    COALESCE(SUM(oi.total_price), 0) AS total_spent,
                    MAX(o.created_at) AS last_order_date,
                    MIN(o.created_at) AS first_order_date
                {self._BASE_FROM}
                WHERE {where_clause}
                GROUP BY u.id, u.email, u.first_name, u.last_name, u.phone, u.created_at
                {having}
                ORDER BY {order_by}
                {pagination}
            """, params)
            return cursor.fetchall()

        finally:
            cursor.close()
            conn.close()

    def count_customers(
        self,
        seller_id: str,
        search: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        joined_since: Optional[datetime] = None
    ) -> int:
        where_clause, params = self._filters(seller_id, search, start_date, end_date)
        if joined_since:
            where_clause += " AND u.created_at >= %s"
            params.append(joined_since)

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT COUNT(DISTINCT u.id) AS count
                {self._BASE_FROM}
                WHERE {where_clause}
            """, params)
            return cursor.fetchone()['count']

        finally:
            cursor.close()
            conn.close()

    def find_purchases(
        self,
        seller_id: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None
    ) -> List[Dict[str, Any]]:
        """One row per purchased line item, newest order first"""
        conditions = ["oi.seller_id = %s"]
        params: List[Any] = [seller_id]
        if start_date:
            conditions.append("o.created_at >= %s")
            params.append(start_date)
        if end_date:
            conditions.append("o.created_at <= %s")
            params.append(end_date)

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT
                    u.email,
                    TRIM(CONCAT(u.first_name, ' ', u.last_name)) AS customer_name,
                    o.order_number,
                    o.created_at AS order_date,
                    oi.product_name,
                    oi.quantity,
                    oi.unit_price,
                    oi.total_price
                {self._BASE_FROM}
                WHERE {' AND '.join(conditions)}
                ORDER BY o.created_at DESC
            """, params)
            return cursor.fetchall()

        finally:
            cursor.close()
            conn.close()

    def is_customer_of(self, customer_id: str, seller_id: str) -> bool:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"SELECT {self._BOUGHT_FROM_SELLER} AS bought", (customer_id, seller_id))
            row = cursor.fetchone()
            return bool(row and row["bought"])

        finally:
            cursor.close()
            conn.close()

    def find_customer(self, customer_id: str, seller_id: str) -> Optional[Dict[str, Any]]:
        """Contact details, or None when the user never bought from the seller"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT id, email, first_name, last_name, phone, created_at
                FROM users
                WHERE id = %s AND {self._BOUGHT_FROM_SELLER}
            """, (customer_id, customer_id, seller_id))
            return cursor.fetchone()

        finally:
            cursor.close()
            conn.close()

    def find_activity(self, customer_id: str, seller_id: str, limit: int = 50) -> List[Dict[str, Any]]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT id, customer_id, activity_type, description, created_at
                FROM customer_activity
                WHERE customer_id = %s AND {self._BOUGHT_FROM_SELLER}
                ORDER BY created_at DESC
                LIMIT %s
            """, (customer_id, customer_id, seller_id, limit))
            return cursor.fetchall()

        finally:
            cursor.close()
            conn.close()
