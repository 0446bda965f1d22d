"""
Campaign Repository - Seller marketing campaigns

Author: Amzify Team
Date: 2025-11-05
"""
from typing import Any, Dict, List, Optional

from psycopg2.extras import Json

from seller_panel.core.database import get_db_connection_dict
from seller_panel.domain.marketing import Campaign, CampaignCreate


class CampaignRepository:

    _COLUMNS = """
        id, seller_id, name, description, discount_type, value,
        start_date, end_date, status, target_products, created_at
    """

    @staticmethod
    def _map_row(row: dict) -> Campaign:
        data = dict(row)
        data['target_products'] = data.get('target_products') or []
        return Campaign(**data)

    def find_by_seller(self, seller_id: str) -> List[Campaign]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {self._COLUMNS}
                FROM campaigns
                WHERE seller_id = %s
                ORDER BY created_at DESC
            """, (seller_id,))
            return [self._map_row(row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def create(self, seller_id: str, data: CampaignCreate) -> Campaign:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                INSERT INTO campaigns (
                    seller_id, name, description, discount_type, value,
                    start_date, end_date, status, target_products
                )
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
                RETURNING {self._COLUMNS}
            """, (
                seller_id, data.name, data.description, data.discount_type, data.value,
                data.start_date, data.end_date, data.status, Json(data.target_products),
            ))
            row = cursor.fetchone()
            conn.commit()
            return self._map_row(row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def update(self, campaign_id: str, seller_id: str, changes: Dict[str, Any]) -> Optional[Campaign]:
        if 'target_products' in changes:
            changes = {**changes, 'target_products': Json(changes['target_products'])}

        assignments = ", ".join(f"{field} = %s" for field in changes)

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                UPDATE campaigns
                SET {assignments}, updated_at = NOW()
                WHERE id = %s AND seller_id = %s
                RETURNING {self._COLUMNS}
            """, list(changes.values()) + [campaign_id, seller_id])
            row = cursor.fetchone()
            conn.commit()
            return self._map_row(row) if row else None

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def delete(self, campaign_id: str, seller_id: str) -> bool:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(
                "DELETE FROM campaigns WHERE id = %s AND seller_id = %s RETURNING id",
                (campaign_id, seller_id)
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
