"""
Ticket Repository - Support tickets opened by sellers

Author: Amzify Team
Date: 2025-11-06
"""
from collections import defaultdict
from typing import List, Optional

from seller_panel.core.database import get_db_connection_dict
from seller_panel.domain.support import SupportTicket, TicketCreate, TicketMessage


class TicketRepository:

    _COLUMNS = "id, user_id, subject, message, status, priority, created_at, updated_at"

    def find_by_user(self, user_id: str, limit: int = 50) -> List[SupportTicket]:
        """Tickets opened by the user, newest first, with their message threads"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {self._COLUMNS}
                FROM support_tickets
                WHERE user_id = %s
                ORDER BY created_at DESC
                LIMIT %s
            """, (user_id, limit))
            tickets = cursor.fetchall()

            messages = defaultdict(list)
            if tickets:
                cursor.execute("""
                    SELECT id, ticket_id, sender_id, message, created_at
                    FROM ticket_messages
                    WHERE ticket_id = ANY(%s::uuid[])
                    ORDER BY created_at
                """, ([t['id'] for t in tickets],))
                for row in cursor.fetchall():
                    messages[row['ticket_id']].append(TicketMessage(**row))

            return [SupportTicket(**t, messages=messages.get(t['id'], [])) for t in tickets]

        finally:
            cursor.close()
            conn.close()

    def create(self, user_id: str, data: TicketCreate) -> SupportTicket:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                INSERT INTO support_tickets (user_id, subject, message, status, priority)
                VALUES (%s, %s, %s, 'open', %s)
                RETURNING {self._COLUMNS}
            """, (user_id, data.subject, data.message, data.priority))
            row = cursor.fetchone()
            conn.commit()
            return SupportTicket(**row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def add_message(self, ticket_id: str, user_id: str, message: str) -> Optional[TicketMessage]:
        """
        Append a message to one of the user's own tickets

        Returns:
            The stored message, or None if the ticket is not the user's
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(
                "SELECT id FROM support_tickets WHERE id = %s AND user_id = %s",
                (ticket_id, user_id)
            )
            if not cursor.fetchone():
                return None

            cursor.execute("""
                INSERT INTO ticket_messages (ticket_id, sender_id, message)
                VALUES (%s, %s, %s)
                RETURNING id, ticket_id, sender_id, message, created_at
            """, (ticket_id, user_id, message))
            row = cursor.fetchone()

            cursor.execute(
                "UPDATE support_tickets SET updated_at = NOW() WHERE id = %s",
                (ticket_id,)
            )
            conn.commit()
            return TicketMessage(**row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()
