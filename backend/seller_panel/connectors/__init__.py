"""
HTTP clients for the Seller Panel API
"""
from seller_panel.connectors.seller_api_client import SellerApiClient, SellerApiError, TokenStore

__all__ = ["SellerApiClient", "SellerApiError", "TokenStore"]
