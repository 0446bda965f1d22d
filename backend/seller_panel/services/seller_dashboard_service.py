"""
Seller Dashboard Service

Aggregates the numbers shown on the seller dashboard: headline stats,
recent orders, best sellers, 30-day analytics and 6-month trends.

Author: Amzify Team
Date: 2025-11-07
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from dateutil.relativedelta import relativedelta

from seller_panel.repositories.order_repository import OrderRepository
from seller_panel.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)

# No rating data is stored yet; the dashboard shows a fixed value
DEFAULT_AVG_RATING = 4.5
TREND_MONTHS = 6

TIME_RANGES = {
    "7d": relativedelta(days=7),
    "30d": relativedelta(days=30),
    "90d": relativedelta(days=90),
    "1y": relativedelta(years=1),
}
DEFAULT_TIME_RANGE = "30d"


def normalize_trend(points: List[Dict[str, Any]], key: str, label_key: str = "month") -> List[Dict[str, Any]]:
    """
    Scale one series of a trend to 0-100 for bar/line charts

    Returns:
        [{'label': ..., 'value': round(v / max * 100)}]; all zeros when max is 0
    """
    values = [float(point.get(key) or 0) for point in points]
    peak = max(values, default=0)

    return [
        {
            "label": point.get(label_key),
            "value": round(value / peak * 100) if peak > 0 else 0,
        }
        for point, value in zip(points, values)
    ]


class SellerDashboardService:
    """
    Read-only aggregates for one seller
    """

    def __init__(
        self,
        order_repo: Optional[OrderRepository] = None,
        product_repo: Optional[ProductRepository] = None
    ):
        self.order_repo = order_repo or OrderRepository()
        self.product_repo = product_repo or ProductRepository()

    def get_stats(self, seller_id: str) -> Dict[str, Any]:
        summary = self.order_repo.sales_summary(seller_id)
        return {
            "totalRevenue": float(summary["revenue"] or 0),
            "totalOrders": summary["orders"],
            "totalProducts": self.product_repo.count_by_seller(seller_id),
            "avgRating": DEFAULT_AVG_RATING,
        }

    def get_recent_orders(self, seller_id: str, limit: int = 5) -> List[Dict[str, Any]]:
        """
        Most recent orders, built by grouping the seller's newest order items

        Over-fetches items (5 per order) since one order may hold many items.
        """
        rows = self.order_repo.find_recent_items(seller_id, limit * 5)

        orders: Dict[str, Dict[str, Any]] = {}
        for row in rows:
            order_id = row["order_id"]
            if order_id not in orders:
                orders[order_id] = {
                    "id": order_id,
                    "order_number": row["order_number"],
                    "customer_name": row["customer_name"],
                    "customer_email": row["customer_email"],
                    "total_amount": float(row["total_amount"]),
                    "status": row["status"],
                    "created_at": row["created_at"],
                    "items": [],
                }
            orders[order_id]["items"].append({
                "product_name": row["product_name"],
                "quantity": row["quantity"],
                "price": float(row["unit_price"]),
            })

        return list(orders.values())[:limit]

    def get_top_products(self, seller_id: str, limit: int = 4) -> List[Dict[str, Any]]:
        rows = self.product_repo.find_top_selling(seller_id, limit)
        return [
            {
                "id": row["id"],
                "name": row["name"],
                "price": float(row["price"]),
                "images": row["images"] or [],
                "totalSold": int(row["total_sold"]),
                "totalRevenue": float(row["total_revenue"]),
                "status": row["status"],
            }
            for row in rows
        ]

    def get_analytics(self, seller_id: str, now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        30-day revenue and order counts

        conversionRate has no visit data behind it: it is min(orders_30d, 100),
        formatted with one decimal.
        """
        now = now or datetime.now(timezone.utc)
        thirty_days_ago = now - timedelta(days=30)
        today_start = now.replace(hour=0, minute=0, second=0, microsecond=0)

        monthly = self.order_repo.sales_summary(seller_id, start=thirty_days_ago)
        today = self.order_repo.sales_summary(seller_id, start=today_start)

        monthly_orders = monthly["orders"]
        conversion_rate = min(monthly_orders, 100) if monthly_orders > 0 else 0

        return {
            "monthlyRevenue": float(monthly["revenue"] or 0),
            "ordersToday": today["orders"],
            "monthlyOrders": monthly_orders,
            "conversionRate": f"{conversion_rate:.1f}",
        }

    def get_trends(self, seller_id: str, now: Optional[datetime] = None) -> Dict[str, List[Dict[str, Any]]]:
        """
        Revenue, orders and new products for the last 6 calendar months

        Returns:
            The same oldest-first month list under 'revenue', 'orders' and 'products'
        """
        now = now or datetime.now(timezone.utc)
        current_month = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

        months = []
        for offset in range(TREND_MONTHS - 1, -1, -1):
            month_start = current_month - relativedelta(months=offset)
            month_end = month_start + relativedelta(months=1)

            summary = self.order_repo.sales_summary(seller_id, start=month_start, end=month_end)
            products = self.product_repo.count_by_seller(
                seller_id, created_from=month_start, created_to=month_end
            )

            months.append({
                "month": month_start.strftime("%b"),
                "revenue": float(summary["revenue"] or 0),
                "orders": summary["orders"],
                "products": products,
            })

        return {"revenue": months, "orders": months, "products": months}

    def get_range_stats(self, seller_id: str, time_range: str = DEFAULT_TIME_RANGE, now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Sales stats, top 5 products and daily trend over 7d, 30d, 90d or 1y

        Unknown ranges fall back to 30d.
        """
        now = now or datetime.now(timezone.utc)
        start = now - TIME_RANGES.get(time_range, TIME_RANGES[DEFAULT_TIME_RANGE])

        summary = self.order_repo.sales_summary(seller_id, start=start)
        revenue = float(summary["revenue"] or 0)
        orders = summary["orders"]

        return {
            "timeRange": time_range if time_range in TIME_RANGES else DEFAULT_TIME_RANGE,
            "stats": {
                "total_orders": orders,
                "total_revenue": revenue,
                "avg_order_value": round(revenue / orders, 2) if orders else 0,
                "total_products": self.product_repo.count_by_seller(seller_id),
            },
            "topProducts": [
                {
                    "name": row["product_name"],
                    "total_sold": int(row["units_sold"]),
                    "revenue": float(row["revenue"]),
                }
                for row in self.order_repo.top_products_between(seller_id, start, now, limit=5)
            ],
            "trend": [
                {
                    "date": row["day"].isoformat(),
                    "revenue": float(row["revenue"] or 0),
                    "orders": row["orders"],
                }
                for row in self.order_repo.daily_revenue(seller_id, start, now)
            ],
        }

    def get_dashboard(self, seller_id: str) -> Dict[str, Any]:
        logger.info(f"Building dashboard for seller {seller_id}")
        return {
            "stats": self.get_stats(seller_id),
            "recentOrders": self.get_recent_orders(seller_id),
            "topProducts": self.get_top_products(seller_id),
            "analytics": self.get_analytics(seller_id),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
