"""
User Repository - Accounts, seller applications and refresh tokens

Author: Amzify Team
Date: 2025-11-03
"""
from datetime import datetime
from typing import Any, Dict, Optional

from psycopg2.extras import Json

from seller_panel.core.database import get_db_connection_dict
from seller_panel.domain.seller import SellerRegistration


# Fields never persisted in the application payload
_SECRET_FIELDS = {"password", "confirm_password", "confirm_account_number"}


class EmailAlreadyRegistered(ValueError):
    pass


class UserRepository:
    """
    Repository for user accounts and their sessions
    """

    _USER_COLUMNS = """
        u.id, u.email, u.password_hash, u.role, u.first_name, u.last_name,
        u.phone, u.is_active, u.is_verified, u.created_at,
        sp.company_name, sp.is_approved
    """

    def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """
        Find a user by email (case-insensitive), joined with the seller profile

        Returns:
            Row dict or None. `is_approved` is None for non-sellers.
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {self._USER_COLUMNS}
                FROM users u
                LEFT JOIN seller_profiles sp ON sp.user_id = u.id
                WHERE LOWER(u.email) = LOWER(%s)
            """, (email,))
            return cursor.fetchone()

        finally:
            cursor.close()
            conn.close()

    def find_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {self._USER_COLUMNS}
                FROM users u
                LEFT JOIN seller_profiles sp ON sp.user_id = u.id
                WHERE u.id = %s
            """, (user_id,))
            return cursor.fetchone()

        finally:
            cursor.close()
            conn.close()

    def create_seller_application(
        self,
        registration: SellerRegistration,
        password_hash: str
    ) -> Dict[str, Any]:
        """
        Create an unverified seller account, an unapproved profile and a
        pending application in one transaction.

        Raises:
            EmailAlreadyRegistered: if the email is taken
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(
                "SELECT id FROM users WHERE LOWER(email) = LOWER(%s)",
                (registration.email,)
            )
            if cursor.fetchone():
                raise EmailAlreadyRegistered("Email already registered")

            cursor.execute("""
                INSERT INTO users (email, password_hash, role, first_name, last_name, phone, is_verified)
                VALUES (%s, %s, 'seller', %s, %s, %s, false)
                RETURNING id
            """, (
                registration.email.lower(),
                password_hash,
                registration.first_name,
                registration.last_name,
                registration.phone or None,
            ))
            user_id = cursor.fetchone()['id']

            cursor.execute("""
                INSERT INTO seller_profiles (
                    user_id, company_name, business_type, description,
                    business_address, city, state, postal_code,
                    gst_number, pan_number,
                    bank_name, account_holder_name, account_number, ifsc_code,
                    is_approved
                )
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, false)
            """, (
                user_id,
                registration.company_name,
                registration.business_type,
                registration.business_description or None,
                registration.business_address or None,
                registration.city or None,
                registration.state or None,
                registration.postal_code or None,
                registration.gst_number or None,
                registration.pan_number or None,
                registration.bank_name or None,
                registration.account_holder_name or None,
                registration.account_number or None,
                registration.ifsc_code or None,
            ))

            payload = registration.model_dump(exclude=_SECRET_FIELDS)
            cursor.execute("""
                INSERT INTO seller_applications (user_id, email, company_name, business_type, payload, status)
                VALUES (%s, %s, %s, %s, %s, 'pending')
                RETURNING id, status, created_at
            """, (
                user_id,
                registration.email.lower(),
                registration.company_name,
                registration.business_type,
                Json(payload),
            ))
            application = cursor.fetchone()
            conn.commit()

            return {
                'user_id': user_id,
                'application_id': application['id'],
                'status': application['status'],
                'created_at': application['created_at'],
            }

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    # ------------------------------------------------------------------
    # Refresh tokens
    # ------------------------------------------------------------------

    def store_refresh_token(self, user_id: str, token: str, expires_at: datetime) -> None:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                INSERT INTO refresh_tokens (user_id, token, expires_at)
                VALUES (%s, %s, %s)
            """, (user_id, token, expires_at))
            conn.commit()

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def rotate_refresh_token(
        self,
        user_id: str,
        old_token: str,
        new_token: str,
        expires_at: datetime
    ) -> bool:
        """
        Replace a stored, unexpired refresh token with a new one.

        Returns:
            False when the old token is unknown or expired (nothing is written)
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                DELETE FROM refresh_tokens
                WHERE token = %s AND user_id = %s AND expires_at > NOW()
                RETURNING id
            """, (old_token, user_id))

            if not cursor.fetchone():
                conn.rollback()
                return False

            cursor.execute("""
                INSERT INTO refresh_tokens (user_id, token, expires_at)
                VALUES (%s, %s, %s)
            """, (user_id, new_token, expires_at))
            conn.commit()
            return True

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def delete_refresh_tokens(self, user_id: str) -> int:
        """Drop every session of the user. Returns how many were removed."""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("DELETE FROM refresh_tokens WHERE user_id = %s", (user_id,))
            deleted = cursor.rowcount
            conn.commit()
            return deleted

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()
