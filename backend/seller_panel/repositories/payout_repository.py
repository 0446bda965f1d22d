"""
Payout Repository - Seller payouts

Author: Amzify Team
Date: 2025-11-05
"""
from decimal import Decimal
from typing import Dict, List

from seller_panel.core.database import get_db_connection_dict
from seller_panel.domain.finance import Payout


class PayoutRepository:

    _COLUMNS = "id, seller_id, amount, status, method, reference, created_at"

    def find_by_seller(self, seller_id: str, limit: int = 100) -> List[Payout]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {self._COLUMNS}
                FROM payouts
                WHERE seller_id = %s
                ORDER BY created_at DESC
                LIMIT %s
            """, (seller_id, limit))
            return [Payout(**row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def totals(self, seller_id: str) -> Dict[str, Decimal]:
        """
        Sum of payouts by state

        Returns:
            {'completed': Decimal, 'pending': Decimal}; failed payouts are ignored
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT
                    COALESCE(SUM(amount) FILTER (WHERE status = 'completed'), 0) AS completed,
                    COALESCE(SUM(amount) FILTER (WHERE status = 'pending'), 0) AS pending
                FROM payouts
                WHERE seller_id = %s
            """, (seller_id,))
            return cursor.fetchone()

        finally:
            cursor.close()
            conn.close()

    def create(self, seller_id: str, amount: Decimal, method: str, reference: str) -> Payout:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                INSERT INTO payouts (seller_id, amount, status, method, reference)
                VALUES (%s, %s, 'pending', %s, %s)
                RETURNING {self._COLUMNS}
            """, (seller_id, amount, method, reference))
            row = cursor.fetchone()
            conn.commit()
            return Payout(**row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()
