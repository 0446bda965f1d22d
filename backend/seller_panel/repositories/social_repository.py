"""
Social Repository - Connected social accounts and posts

Author: Amzify Team
Date: 2025-11-06
"""
from datetime import datetime
from typing import Dict, List, Optional

from psycopg2.extras import Json

from seller_panel.core.database import get_db_connection_dict
from seller_panel.domain.social import SocialAccount, SocialPost


class SocialRepository:

    def find_accounts(self, seller_id: str, connected_only: bool = True) -> List[SocialAccount]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            connected_filter = "AND connected = true" if connected_only else ""
            cursor.execute(f"""
                SELECT platform, username, followers, engagement, connected, connected_at
                FROM social_accounts
                WHERE seller_id = %s {connected_filter}
                ORDER BY platform
            """, (seller_id,))
            return [SocialAccount(**row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def upsert_account(
        self,
        seller_id: str,
        platform: str,
        username: str,
        access_token: Optional[str]
    ) -> SocialAccount:
        """Connect a platform, reconnecting it if it was disconnected before"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                INSERT INTO social_accounts (seller_id, platform, username, access_token, connected, connected_at)
                VALUES (%s, %s, %s, %s, true, NOW())
                ON CONFLICT (seller_id, platform) DO UPDATE
                SET username = EXCLUDED.username,
                    access_token = EXCLUDED.access_token,
                    connected = true,
                    connected_at = NOW()
                RETURNING platform, username, followers, engagement, connected, connected_at
            """, (seller_id, platform, username, access_token))
            row = cursor.fetchone()
            conn.commit()
            return SocialAccount(**row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def disconnect(self, seller_id: str, platform: str) -> bool:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                UPDATE social_accounts
                SET connected = false, access_token = NULL
                WHERE seller_id = %s AND platform = %s AND connected = true
                RETURNING platform
            """, (seller_id, platform))
            disconnected = cursor.fetchone() is not None
            conn.commit()
            return disconnected

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def create_post(
        self,
        seller_id: str,
        content: str,
        platforms: List[str],
        scheduled_at: Optional[datetime],
        status: str
    ) -> SocialPost:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                INSERT INTO social_posts (seller_id, content, platforms, scheduled_at, status)
                VALUES (%s, %s, %s, %s, %s)
                RETURNING id, content, platforms, scheduled_at, status, created_at
            """, (seller_id, content, Json(platforms), scheduled_at, status))
            row = cursor.fetchone()
            conn.commit()
            return SocialPost(**row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def count_posts(self, seller_id: str) -> Dict[str, int]:
        """Returns {'published': n, 'scheduled': n}"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT
                    COUNT(*) FILTER (WHERE status = 'published') AS published,
                    COUNT(*) FILTER (WHERE status = 'scheduled') AS scheduled
                FROM social_posts
                WHERE seller_id = %s
            """, (seller_id,))
            return cursor.fetchone()

        finally:
            cursor.close()
            conn.close()
