"""
Support API Endpoints
Tickets raised by the signed-in user and their message threads

Author: Amzify Team
Date: 2025-11-06
"""
from fastapi import APIRouter, Depends, HTTPException

from seller_panel.core.auth import TokenUser, get_current_user
from seller_panel.domain.support import TicketCreate, TicketReply
from seller_panel.repositories.ticket_repository import TicketRepository

router = APIRouter()


@router.get("/tickets")
async def get_tickets(user: TokenUser = Depends(get_current_user)):
    try:
        tickets = TicketRepository().find_by_user(user.id)
        return {"tickets": [ticket.model_dump() for ticket in tickets]}

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching tickets: {str(e)}")


@router.post("/tickets", status_code=201)
async def create_ticket(data: TicketCreate, user: TokenUser = Depends(get_current_user)):
    try:
        ticket = TicketRepository().create(user.id, data)
        return {"message": "Ticket created successfully", "ticket": ticket.model_dump()}

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error creating ticket: {str(e)}")


@router.post("/tickets/{ticket_id}/messages")
async def add_ticket_message(ticket_id: str, reply: TicketReply, user: TokenUser = Depends(get_current_user)):
    try:
        message = TicketRepository().add_message(ticket_id, user.id, reply.message)
        if not message:
            raise HTTPException(status_code=404, detail="Ticket not found or access denied")

        return {"message": "Reply added", "ticketMessage": message.model_dump()}

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error adding message: {str(e)}")
