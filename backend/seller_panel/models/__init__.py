"""
Database table definitions
"""
from .account import User, SellerProfile, SellerApplication, RefreshToken
from .catalog import Category, Product
from .order import Order, OrderItem, OrderTracking, Shipment
from .engagement import (
    Payout,
    Campaign,
    SocialAccount,
    SocialPost,
    SupportTicket,
    TicketMessage,
    CustomerActivity,
)

__all__ = [
    "User",
    "SellerProfile",
    "SellerApplication",
    "RefreshToken",
    "Category",
    "Product",
    "Order",
    "OrderItem",
    "OrderTracking",
    "Shipment",
    "Payout",
    "Campaign",
    "SocialAccount",
    "SocialPost",
    "SupportTicket",
    "TicketMessage",
    "CustomerActivity",
]
