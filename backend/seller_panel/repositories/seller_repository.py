"""
Seller Repository - Seller storefront profiles

Author: Amzify Team
Date: 2025-11-03
"""
from typing import Any, Dict, Optional

from seller_panel.core.database import get_db_connection_dict
from seller_panel.domain.seller import SellerProfile


# Profile fields that live on the users table rather than seller_profiles
_USER_FIELDS = ("first_name", "last_name", "phone")


class SellerRepository:
    """
    Repository for seller profile data (users + seller_profiles)
    """

    def find_profile(self, user_id: str) -> Optional[SellerProfile]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT
                    u.id AS user_id, u.email, u.first_name, u.last_name, u.phone,
                    sp.company_name, sp.business_type, sp.description,
                    sp.business_address, sp.city, sp.state, sp.postal_code,
                    sp.gst_number, sp.pan_number, sp.profile_image,
                    COALESCE(sp.is_approved, false) AS is_approved,
                    u.created_at
                FROM users u
                LEFT JOIN seller_profiles sp ON sp.user_id = u.id
                WHERE u.id = %s
            """, (user_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return SellerProfile(**row)

        finally:
            cursor.close()
            conn.close()

    def update_profile(self, user_id: str, changes: Dict[str, Any]) -> Optional[SellerProfile]:
        """
        Apply a partial update across users and seller_profiles

        Args:
            changes: Already-validated field -> value mapping

        Returns:
            Updated profile, or None if the user does not exist
        """
        user_changes = {k: v for k, v in changes.items() if k in _USER_FIELDS}
        profile_changes = {k: v for k, v in changes.items() if k not in _USER_FIELDS}

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            if user_changes:
                assignments = ", ".join(f"{field} = %s" for field in user_changes)
                cursor.execute(
                    f"UPDATE users SET {assignments}, updated_at = NOW() WHERE id = %s RETURNING id",
                    list(user_changes.values()) + [user_id]
                )
                if not cursor.fetchone():
                    conn.rollback()
                    return None

            if profile_changes:
                columns = list(profile_changes)
                placeholders = ", ".join(["%s"] * (len(columns) + 1))
                updates = ", ".join(f"{c} = EXCLUDED.{c}" for c in columns)
                cursor.execute(f"""
                    INSERT INTO seller_profiles (user_id, {", ".join(columns)})
                    VALUES ({placeholders})
                    ON CONFLICT (user_id) DO UPDATE SET {updates}, updated_at = NOW()
                """, [user_id] + list(profile_changes.values()))

            conn.commit()

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

        return self.find_profile(user_id)

    def set_profile_image(self, user_id: str, image_url: str) -> None:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                INSERT INTO seller_profiles (user_id, profile_image)
                VALUES (%s, %s)
                ON CONFLICT (user_id) DO UPDATE
                SET profile_image = EXCLUDED.profile_image, updated_at = NOW()
            """, (user_id, image_url))
            conn.commit()

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()
