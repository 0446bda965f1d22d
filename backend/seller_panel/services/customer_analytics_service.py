"""
Customer Analytics Service

Who buys from a seller and how: overview metrics, segmented customer list,
profiles, rule-based purchase insights and CSV exports.

Classification rules:
- customer type: loyal (3+ orders), returning (2 orders), new
- segment: loyal, high_value (> 5000 spent), at_risk (> 60 days silent),
  new (single order in the last 30 days), regular

Author: Amzify Team
Date: 2025-11-08
"""
import logging
import math
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

import pandas as pd

from seller_panel.domain.customer import Customer, PurchaseInsights
from seller_panel.repositories.customer_repository import CustomerRepository
from seller_panel.repositories.order_repository import OrderRepository
from seller_panel.repositories.ticket_repository import TicketRepository

logger = logging.getLogger(__name__)

HIGH_VALUE_SPEND = 5000
AT_RISK_DAYS = 60
NEW_CUSTOMER_DAYS = 30
DEFAULT_ORDER_GAP_DAYS = 30
# Used when a customer has never ordered
NO_ORDER_DAYS = 999

CUSTOMER_EXPORT_FIELDS = [
    "email", "first_name", "last_name", "phone",
    "total_orders", "total_spent", "last_order_date",
]
PURCHASE_REPORT_FIELDS = [
    "email", "customer_name", "order_number", "order_date",
    "product_name", "quantity", "unit_price", "total_price",
]
REPEAT_CUSTOMER_FIELDS = CUSTOMER_EXPORT_FIELDS + ["first_order_date"]


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _days_between(later: datetime, earlier: datetime) -> int:
    """Whole days from earlier to later; naive datetimes are taken as UTC"""
    if earlier.tzinfo is None:
        earlier = earlier.replace(tzinfo=timezone.utc)
    if later.tzinfo is None:
        later = later.replace(tzinfo=timezone.utc)
    return math.floor((later - earlier).total_seconds() / 86400)


def customer_type(order_count: int) -> str:
    if order_count >= 3:
        return "loyal"
    if order_count > 1:
        return "returning"
    return "new"


def customer_segment(
    order_count: int,
    total_spent: float,
    last_order_date: Optional[datetime],
    now: Optional[datetime] = None
) -> str:
    """Segment by frequency first, then spend, then recency"""
    days_since_last = (
        _days_between(now or _now(), last_order_date) if last_order_date else NO_ORDER_DAYS
    )

    if order_count >= 3:
        return "loyal"
    if float(total_spent or 0) > HIGH_VALUE_SPEND:
        return "high_value"
    if days_since_last > AT_RISK_DAYS and order_count > 0:
        return "at_risk"
    if days_since_last <= NEW_CUSTOMER_DAYS and order_count == 1:
        return "new"
    return "regular"


def purchase_insights(order_dates: List[datetime], now: Optional[datetime] = None) -> PurchaseInsights:
    """
    Predict the next purchase from the gaps between past orders

    Args:
        order_dates: Dates of the customer's orders with the seller (any order)
    """
    if not order_dates:
        return PurchaseInsights(
            next_purchase_prediction="No purchase history available",
            suggested_discount=None,
            churn_risk="low",
        )

    now = now or _now()
    ordered = sorted(order_dates)
    days_since_last = _days_between(now, ordered[-1])

    avg_gap = DEFAULT_ORDER_GAP_DAYS
    if len(ordered) > 1:
        gaps = [_days_between(b, a) for a, b in zip(ordered, ordered[1:])]
        avg_gap = math.floor(sum(gaps) / len(gaps))

    expected_in = max(0, avg_gap - days_since_last)
    if expected_in <= 7:
        prediction = "Within next 7 days"
    elif expected_in <= 30:
        prediction = f"Within next {expected_in} days"
    else:
        prediction = "More than 30 days"

    discount = None
    if days_since_last > avg_gap * 1.5:
        discount = "15% to re-engage"
    elif len(ordered) >= 5:
        discount = "10% loyalty reward"

    if days_since_last > avg_gap * 2:
        churn = "high"
    elif days_since_last > avg_gap * 1.3:
        churn = "medium"
    else:
        churn = "low"

    return PurchaseInsights(
        next_purchase_prediction=prediction,
        suggested_discount=discount,
        churn_risk=churn,
        order_frequency=f"{avg_gap} days",
        days_since_last_order=days_since_last,
    )


def _display_name(row: Dict[str, Any]) -> str:
    return f"{row.get('first_name') or ''} {row.get('last_name') or ''}".strip() or "N/A"


def rows_to_csv(rows: List[Dict[str, Any]], fields: List[str]) -> str:
    """CSV text with a header row, columns in the given order"""
    frame = pd.DataFrame(rows, columns=fields)
    return frame.to_csv(index=False)


def export_filename(kind: str, today: Optional[date] = None) -> str:
    return f"{kind}_{(today or datetime.now(timezone.utc).date()).isoformat()}.csv"


class CustomerAnalyticsService:

    def __init__(
        self,
        customer_repo: Optional[CustomerRepository] = None,
        order_repo: Optional[OrderRepository] = None,
        ticket_repo: Optional[TicketRepository] = None
    ):
        self.customer_repo = customer_repo or CustomerRepository()
        self.order_repo = order_repo or OrderRepository()
        self.ticket_repo = ticket_repo or TicketRepository()

    def _to_customer(self, row: Dict[str, Any], now: Optional[datetime] = None) -> Customer:
        orders = int(row["total_orders"])
        spent = float(row["total_spent"] or 0)
        return Customer(
            id=row["id"],
            name=_display_name(row),
            email=row["email"],
            phone=row.get("phone") or "N/A",
            total_orders=orders,
            total_spent=spent,
            last_order_date=row.get("last_order_date"),
            customer_type=customer_type(orders),
            customer_segment=customer_segment(orders, spent, row.get("last_order_date"), now),
        )

    def get_overview(self, seller_id: str, now: Optional[datetime] = None) -> Dict[str, Any]:
        now = now or _now()
        month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

        rows = self.customer_repo.find_customer_stats(seller_id)
        total_customers = len(rows)
        new_this_month = self.customer_repo.count_customers(seller_id, joined_since=month_start)

        total_orders = sum(int(r["total_orders"]) for r in rows)
        total_revenue = sum(float(r["total_spent"] or 0) for r in rows)
        returning = sum(1 for r in rows if int(r["total_orders"]) > 1)

        return {
            "totalCustomers": total_customers,
            "newCustomersThisMonth": new_this_month,
            "returningCustomers": returning,
            "repeatPurchaseRate": round(returning / total_customers * 100, 1) if total_customers else 0,
            "averageOrderValue": round(total_revenue / total_orders, 2) if total_orders else 0,
            "customerLifetimeValue": round(total_revenue / total_customers, 2) if total_customers else 0,
        }

    def list_customers(
        self,
        seller_id: str,
        search: Optional[str] = None,
        segment: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        page: int = 1,
        limit: int = 50
    ) -> Dict[str, Any]:
        """
        Paginated customers, highest spend first

        The segment filter applies to the current page only; `total` counts
        every customer matching search and dates.
        """
        offset = (page - 1) * limit
        rows = self.customer_repo.find_customer_stats(
            seller_id, search=search, start_date=start_date, end_date=end_date,
            limit=limit, offset=offset
        )
        customers = [self._to_customer(row) for row in rows]
        if segment:
            customers = [c for c in customers if c.customer_segment == segment]

        total = self.customer_repo.count_customers(
            seller_id, search=search, start_date=start_date, end_date=end_date
        )

        return {
            "customers": [c.model_dump() for c in customers],
            "total": total,
            "page": page,
            "totalPages": math.ceil(total / limit) if limit else 0,
        }

    def get_segmentation(self, seller_id: str) -> Dict[str, int]:
        segments = {"loyal": 0, "high_value": 0, "at_risk": 0, "new": 0, "regular": 0}
        for row in self.customer_repo.find_customer_stats(seller_id):
            segment = customer_segment(int(row["total_orders"]), row["total_spent"], row["last_order_date"])
            segments[segment] += 1
        return segments

    def get_profile(self, seller_id: str, customer_id: str) -> Optional[Dict[str, Any]]:
        """None unless the customer has ordered the seller's items"""
        orders = self.order_repo.find_by_customer_for_seller(customer_id, seller_id)
        if not orders:
            return None

        customer = self.customer_repo.find_customer(customer_id, seller_id)
        if not customer:
            return None

        total_orders = len(orders)
        total_spent = sum(float(order.seller_total) for order in orders)

        return {
            "profile": {
                "id": customer["id"],
                "name": _display_name(customer),
                "email": customer["email"],
                "phone": customer.get("phone"),
                "joinedDate": customer["created_at"],
                "customer_type": customer_type(total_orders),
            },
            "stats": {
                "totalOrders": total_orders,
                "totalSpent": round(total_spent, 2),
                "averageOrderValue": round(total_spent / total_orders, 2) if total_orders else 0,
            },
            "orders": [order.to_dict() for order in orders],
            "tickets": [t.model_dump(exclude={"messages"}) for t in self.ticket_repo.find_by_user(customer_id, limit=10)],
        }

    def get_activity(self, seller_id: str, customer_id: str) -> Optional[List[Dict[str, Any]]]:
        if not self.customer_repo.is_customer_of(customer_id, seller_id):
            return None
        return self.customer_repo.find_activity(customer_id, seller_id)

    def get_insights(self, seller_id: str, customer_id: str) -> Dict[str, Any]:
        orders = self.order_repo.find_by_customer_for_seller(customer_id, seller_id)
        insights = purchase_insights([order.created_at for order in orders if order.created_at])
        if insights.order_frequency is None:
            return insights.model_dump(
                by_alias=True,
                include={"next_purchase_prediction", "suggested_discount", "churn_risk"},
            )
        return insights.model_dump(by_alias=True)

    # ------------------------------------------------------------------
    # CSV exports
    # ------------------------------------------------------------------

    def export_customers(
        self,
        seller_id: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None
    ) -> str:
        rows = self.customer_repo.find_customer_stats(seller_id, start_date=start_date, end_date=end_date)
        logger.info(f"Exporting {len(rows)} customers for seller {seller_id}")
        return rows_to_csv(rows, CUSTOMER_EXPORT_FIELDS)

    def export_purchase_report(
        self,
        seller_id: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None
    ) -> str:
        rows = self.customer_repo.find_purchases(seller_id, start_date=start_date, end_date=end_date)
        logger.info(f"Exporting {len(rows)} purchase lines for seller {seller_id}")
        return rows_to_csv(rows, PURCHASE_REPORT_FIELDS)

    def export_repeat_customers(self, seller_id: str) -> str:
        rows = self.customer_repo.find_customer_stats(seller_id, repeat_only=True)
        return rows_to_csv(rows, REPEAT_CUSTOMER_FIELDS)
