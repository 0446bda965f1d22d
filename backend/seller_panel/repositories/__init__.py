"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from business logic.

Author: Amzify Team
Date: 2025-11-03
"""
from seller_panel.repositories.user_repository import UserRepository
from seller_panel.repositories.seller_repository import SellerRepository
from seller_panel.repositories.category_repository import CategoryRepository
from seller_panel.repositories.product_repository import ProductRepository
from seller_panel.repositories.order_repository import OrderRepository
from seller_panel.repositories.customer_repository import CustomerRepository
from seller_panel.repositories.campaign_repository import CampaignRepository
from seller_panel.repositories.payout_repository import PayoutRepository
from seller_panel.repositories.shipment_repository import ShipmentRepository
from seller_panel.repositories.social_repository import SocialRepository
from seller_panel.repositories.ticket_repository import TicketRepository

__all__ = [
    'UserRepository',
    'SellerRepository',
    'CategoryRepository',
    'ProductRepository',
    'OrderRepository',
    'CustomerRepository',
    'CampaignRepository',
    'PayoutRepository',
    'ShipmentRepository',
    'SocialRepository',
    'TicketRepository',
]
