"""
Shipment Repository - Seller shipments and tracking history

Author: Amzify Team
Date: 2025-11-06
"""
from datetime import date
from typing import List, Optional

from seller_panel.core.database import get_db_connection_dict
from seller_panel.domain.logistics import Shipment


class ShipmentRepository:

    _COLUMNS = """
        s.id, s.order_id, o.order_number, s.carrier, s.tracking_number,
        s.status, s.estimated_delivery, s.created_at, s.updated_at
    """

    def find_by_seller(self, seller_id: str, status: Optional[str] = None) -> List[Shipment]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            params = [seller_id]
            status_filter = ""
            if status:
                status_filter = "AND s.status = %s"
                params.append(status)

            cursor.execute(f"""
                SELECT {self._COLUMNS}
                FROM shipments s
                JOIN orders o ON o.id = s.order_id
                WHERE s.seller_id = %s {status_filter}
                ORDER BY s.created_at DESC
            """, params)
            return [Shipment(**row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def create(
        self,
        seller_id: str,
        order_id: str,
        carrier: str,
        tracking_number: str,
        estimated_delivery: Optional[date]
    ) -> Shipment:
        """
        Create a shipment and mirror carrier/tracking number onto the order
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                INSERT INTO shipments (order_id, seller_id, carrier, tracking_number, status, estimated_delivery)
                VALUES (%s, %s, %s, %s, 'processing', %s)
                RETURNING id
            """, (order_id, seller_id, carrier, tracking_number, estimated_delivery))
            shipment_id = cursor.fetchone()['id']

            cursor.execute("""
                UPDATE orders
                SET tracking_number = %s, carrier = %s, updated_at = NOW()
                WHERE id = %s
            """, (tracking_number, carrier, order_id))

            cursor.execute(f"""
                SELECT {self._COLUMNS}
                FROM shipments s
                JOIN orders o ON o.id = s.order_id
                WHERE s.id = %s
            """, (shipment_id,))
            row = cursor.fetchone()
            conn.commit()
            return Shipment(**row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def update_status(
        self,
        shipment_id: str,
        seller_id: str,
        status: str,
        description: Optional[str] = None,
        location: Optional[str] = None,
        order_status: Optional[str] = None
    ) -> Optional[Shipment]:
        """
        Move a seller's shipment to a new status and record a tracking event

        Args:
            order_status: When given, the parent order is moved to this status too

        Returns:
            Updated shipment or None if it is not the seller's
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                UPDATE shipments
                SET status = %s, updated_at = NOW()
                WHERE id = %s AND seller_id = %s
                RETURNING order_id
            """, (status, shipment_id, seller_id))
            updated = cursor.fetchone()

            if not updated:
                conn.rollback()
                return None

            order_id = updated['order_id']
            cursor.execute("""
                INSERT INTO order_tracking (order_id, status, description, location)
                VALUES (%s, %s, %s, %s)
            """, (order_id, status, description or f"Shipment {status.replace('_', ' ')}", location))

            if order_status:
                cursor.execute(
                    "UPDATE orders SET status = %s, updated_at = NOW() WHERE id = %s",
                    (order_status, order_id)
                )

            cursor.execute(f"""
                SELECT {self._COLUMNS}
                FROM shipments s
                JOIN orders o ON o.id = s.order_id
                WHERE s.id = %s
            """, (shipment_id,))
            row = cursor.fetchone()
            conn.commit()
            return Shipment(**row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()
