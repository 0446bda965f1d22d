"""
Product Repository - Data Access Layer for Products

Handles all database queries for products and returns Product domain models.
Ownership is enforced in SQL: write queries filter on seller_id, so a
seller can never touch another seller's listing.

Author: Amzify Team
Date: 2025-11-03
"""
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from psycopg2.extras import Json

from seller_panel.core.database import get_db_connection_dict
from seller_panel.domain.product import Product, ProductCreate


class ProductRepository:
    """
    Repository for Product data access

    All SQL queries for products are centralized here.
    Returns Product domain models, not raw dictionaries.
    """

    _COLUMNS = """
        p.id, p.seller_id, p.category_id, c.name AS category_name,
        p.name, p.slug, p.description, p.short_description,
        p.price, p.compare_price, p.cost_price, p.stock_quantity,
        p.sku, p.barcode, p.weight, p.images, p.status,
        p.created_at, p.updated_at
    """

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        """Map a database row to the Product domain model"""
        data = dict(row)
        data['images'] = data.get('images') or []
        return Product(**data)

    def find_by_id(self, product_id: str) -> Optional[Product]:
        """
        Find product by ID

        Returns:
            Product or None if not found
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {self._COLUMNS}
                FROM products p
                LEFT JOIN categories c ON c.id = p.category_id
                WHERE p.id = %s
            """, (product_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return self._map_row_to_product(row)

        finally:
            cursor.close()
            conn.close()

    def find_all(
        self,
        seller_id: Optional[str] = None,
        category_id: Optional[str] = None,
        status: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 50,
        offset: int = 0
    ) -> Tuple[List[Product], int]:
        """
        Find products with filters

        Args:
            seller_id: Restrict to one seller's listings
            category_id: Filter by category
            status: Filter by moderation status
            search: Search in name or SKU
            limit: Maximum results to return
            offset: Number of results to skip

        Returns:
            Tuple of (list of products, total count)
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            # Build WHERE clause
            conditions = []
            params = []

            if seller_id:
                conditions.append("p.seller_id = %s")
                params.append(seller_id)

            if category_id:
                conditions.append("p.category_id = %s")
                params.append(category_id)

            if status:
                conditions.append("p.status = %s")
                params.append(status)

            if search:
                conditions.append("(p.name ILIKE %s OR p.sku ILIKE %s)")
                search_term = f"%{search}%"
                params.extend([search_term, search_term])

            where_clause = " AND ".join(conditions) if conditions else "1=1"

            cursor.execute(f"""
                SELECT COUNT(*) AS total
                FROM products p
                WHERE {where_clause}
            """, params)
            total = cursor.fetchone()['total']

            cursor.execute(f"""
                SELECT {self._COLUMNS}
                FROM products p
                LEFT JOIN categories c ON c.id = p.category_id
                WHERE {where_clause}
                ORDER BY p.created_at DESC
                LIMIT %s OFFSET %s
            """, params + [limit, offset])

            products = [self._map_row_to_product(row) for row in cursor.fetchall()]
            return products, total

        finally:
            cursor.close()
            conn.close()

    def sku_exists(self, sku: str, exclude_product_id: Optional[str] = None) -> bool:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            if exclude_product_id:
                cursor.execute(
                    "SELECT 1 FROM products WHERE sku = %s AND id <> %s",
                    (sku, exclude_product_id)
                )
            else:
                cursor.execute("SELECT 1 FROM products WHERE sku = %s", (sku,))
            return cursor.fetchone() is not None

        finally:
            cursor.close()
            conn.close()

    def create(self, seller_id: str, data: ProductCreate, slug: str) -> Product:
        """
        Insert a new listing in pending_approval status

        Returns:
            The created Product
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                INSERT INTO products (
                    seller_id, category_id, name, slug, description, short_description,
                    price, compare_price, cost_price, stock_quantity,
                    sku, barcode, weight, images, status
                )
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, 'pending_approval')
                RETURNING id
            """, (
                seller_id, data.category_id, data.name, slug,
                data.description, data.short_description,
                data.price, data.compare_price, data.cost_price, data.stock_quantity,
                data.sku, data.barcode, data.weight, Json(data.images),
            ))
            product_id = cursor.fetchone()['id']
            conn.commit()

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

        return self.find_by_id(product_id)

    def update(self, product_id: str, seller_id: str, changes: Dict[str, Any]) -> Optional[Product]:
        """
        Update the given fields of a seller's own product

        Returns:
            Updated Product, or None if it does not exist or belongs to someone else
        """
        if 'images' in changes:
            changes = {**changes, 'images': Json(changes['images'])}

        assignments = ", ".join(f"{field} = %s" for field in changes)

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                UPDATE products
                SET {assignments}, updated_at = NOW()
                WHERE id = %s AND seller_id = %s
                RETURNING id
            """, list(changes.values()) + [product_id, seller_id])

            updated = cursor.fetchone()
            conn.commit()

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

        return self.find_by_id(product_id) if updated else None

    def delete(self, product_id: str, seller_id: str) -> bool:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(
                "DELETE FROM products WHERE id = %s AND seller_id = %s RETURNING id",
                (product_id, seller_id)
            )
            deleted = cursor.fetchone() is not None
            conn.commit()
            return deleted

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def append_images(self, product_id: str, seller_id: str, urls: List[str]) -> Optional[Product]:
        """Append uploaded image URLs to a seller's own product"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                UPDATE products
                SET images = COALESCE(images, '[]'::jsonb) || %s::jsonb, updated_at = NOW()
                WHERE id = %s AND seller_id = %s
                RETURNING id
            """, (Json(urls), product_id, seller_id))
            updated = cursor.fetchone()
            conn.commit()

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

        return self.find_by_id(product_id) if updated else None

    def count_by_seller(
        self,
        seller_id: str,
        created_from: Optional[datetime] = None,
        created_to: Optional[datetime] = None
    ) -> int:
        """Count a seller's products, optionally limited to a creation window [from, to)"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            conditions = ["seller_id = %s"]
            params: List[Any] = [seller_id]

            if created_from:
                conditions.append("created_at >= %s")
                params.append(created_from)
            if created_to:
                conditions.append("created_at < %s")
                params.append(created_to)

            cursor.execute(
                f"SELECT COUNT(*) AS total FROM products WHERE {' AND '.join(conditions)}",
                params
            )
            return cursor.fetchone()['total']

        finally:
            cursor.close()
            conn.close()

    def find_top_selling(self, seller_id: str, limit: int = 4) -> List[Dict[str, Any]]:
        """
        Products ranked by units sold (seller's own order items only)

        Returns:
            Dicts with id, name, price, images, status, total_sold, total_revenue
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT
                    p.id, p.name, p.price, p.images, p.status,
                    COALESCE(SUM(oi.quantity), 0) AS total_sold,
                    COALESCE(SUM(oi.total_price), 0) AS total_revenue
                FROM products p
                LEFT JOIN order_items oi
                    ON oi.product_id = p.id AND oi.seller_id = p.seller_id
                WHERE p.seller_id = %s
                GROUP BY p.id
                ORDER BY total_sold DESC, p.created_at DESC
                LIMIT %s
            """, (seller_id, limit))
            return cursor.fetchall()

        finally:
            cursor.close()
            conn.close()
