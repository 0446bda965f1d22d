"""
Domain Layer - Business Entities

Pydantic models for the seller panel: catalog, orders, customers,
finance, marketing, logistics, social media and support.

Author: Amzify Team
Date: 2025-11-02
"""
from seller_panel.domain.product import Product, Category
from seller_panel.domain.order import Order, OrderItem
from seller_panel.domain.seller import SellerProfile, SellerRegistration
from seller_panel.domain.customer import Customer, PurchaseInsights
from seller_panel.domain.finance import Payout
from seller_panel.domain.marketing import Campaign
from seller_panel.domain.logistics import Shipment
from seller_panel.domain.social import SocialAccount, SocialPost
from seller_panel.domain.support import SupportTicket, TicketMessage

__all__ = [
    'Product', 'Category', 'Order', 'OrderItem', 'SellerProfile',
    'SellerRegistration', 'Customer', 'PurchaseInsights', 'Payout',
    'Campaign', 'Shipment', 'SocialAccount', 'SocialPost',
    'SupportTicket', 'TicketMessage',
]
