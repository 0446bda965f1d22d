"""
Category Repository - Public catalog categories

Author: Amzify Team
Date: 2025-11-03
"""
from typing import List, Optional

from seller_panel.core.database import get_db_connection_dict
from seller_panel.domain.product import Category


class CategoryRepository:

    _SELECT = """
        SELECT
            c.id, c.name, c.slug, c.description, c.is_active,
            COUNT(p.id) FILTER (WHERE p.status = 'active') AS products_count
        FROM categories c
        LEFT JOIN products p ON p.category_id = c.id
    """

    def find_all(self, include_inactive: bool = False) -> List[Category]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            where = "" if include_inactive else "WHERE c.is_active = true"
            cursor.execute(f"""
                {self._SELECT}
                {where}
                GROUP BY c.id
                ORDER BY c.name
            """)
            return [Category(**row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def find_by_id(self, category_id: str) -> Optional[Category]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                {self._SELECT}
                WHERE c.id = %s
                GROUP BY c.id
            """, (category_id,))

            row = cursor.fetchone()
            return Category(**row) if row else None

        finally:
            cursor.close()
            conn.close()
