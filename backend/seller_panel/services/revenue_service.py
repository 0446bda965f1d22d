"""
Revenue Service

Revenue by period, earnings after platform commission, payouts and the
payout history export.

Author: Amzify Team
Date: 2025-11-09
"""
import logging
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

import pandas as pd
from dateutil.relativedelta import relativedelta

from seller_panel.core.config import settings
from seller_panel.domain.finance import Payout
from seller_panel.repositories.order_repository import OrderRepository
from seller_panel.repositories.payout_repository import PayoutRepository

logger = logging.getLogger(__name__)

PERIOD_DAYS = {"week": 7, "month": 30, "year": 365}

PAYOUT_EXPORT_COLUMNS = {
    "date": "Date",
    "amount": "Amount (₹)",
    "method": "Method",
    "reference": "Reference",
    "status": "Status",
}


def growth_rate(current: float, previous: float) -> float:
    """Percent change, one decimal. From zero: 100 if anything was sold, else 0"""
    if previous:
        return round((current - previous) / previous * 100, 1)
    return 100.0 if current else 0.0


def next_payout_date(today: date) -> date:
    """Payouts run on the 1st and the 15th; the next one is strictly after today"""
    if today.day < 15:
        return today.replace(day=15)
    return today.replace(day=1) + relativedelta(months=1)


def fill_daily_series(rows: List[Dict[str, Any]], start: date, days: int) -> List[Dict[str, Any]]:
    """One {date, revenue} point per day from start, zero where there were no sales"""
    by_day = {row["day"]: float(row["revenue"] or 0) for row in rows}
    series = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        series.append({"date": day.isoformat(), "revenue": by_day.get(day, 0.0)})
    return series


class PayoutRejected(ValueError):
    pass


class RevenueService:

    def __init__(
        self,
        order_repo: Optional[OrderRepository] = None,
        payout_repo: Optional[PayoutRepository] = None,
        commission_rate: Optional[float] = None
    ):
        self.order_repo = order_repo or OrderRepository()
        self.payout_repo = payout_repo or PayoutRepository()
        self.commission_rate = settings.COMMISSION_RATE if commission_rate is None else commission_rate

    def get_revenue(self, seller_id: str, period: str = "month", now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Current period vs the period before it

        Raises:
            ValueError: unknown period
        """
        if period not in PERIOD_DAYS:
            raise ValueError(f"Invalid period: {period}. Use week, month or year")

        days = PERIOD_DAYS[period]
        now = now or datetime.now(timezone.utc)
        # Whole days, today included
        current_start = datetime.combine(now.date() - timedelta(days=days - 1), datetime.min.time(), tzinfo=now.tzinfo)
        current_end = datetime.combine(now.date() + timedelta(days=1), datetime.min.time(), tzinfo=now.tzinfo)
        previous_start = current_start - timedelta(days=days)

        current = self.order_repo.sales_summary(seller_id, start=current_start, end=current_end)
        previous = self.order_repo.sales_summary(seller_id, start=previous_start, end=current_start)

        current_revenue = float(current["revenue"] or 0)
        previous_revenue = float(previous["revenue"] or 0)
        total_orders = current["orders"]

        top_products = self.order_repo.top_products_between(seller_id, current_start, current_end, limit=5)
        daily = self.order_repo.daily_revenue(seller_id, current_start, current_end)

        return {
            "period": period,
            "current_period": current_revenue,
            "previous_period": previous_revenue,
            "growth_rate": growth_rate(current_revenue, previous_revenue),
            "total_orders": total_orders,
            "avg_order_value": round(current_revenue / total_orders, 2) if total_orders else 0,
            "top_products": [
                {
                    "name": row["product_name"],
                    "revenue": float(row["revenue"]),
                    "orders": int(row["units_sold"]),
                }
                for row in top_products
            ],
            "daily_revenue": fill_daily_series(daily, current_start.date(), days),
        }

    def get_financial_summary(self, seller_id: str, today: Optional[date] = None) -> Dict[str, Any]:
        today = today or datetime.now(timezone.utc).date()

        earnings = float(self.order_repo.sales_summary(seller_id)["revenue"] or 0)
        commission = round(earnings * self.commission_rate, 2)
        net = round(earnings - commission, 2)

        totals = self.payout_repo.totals(seller_id)
        completed = float(totals["completed"])
        pending = float(totals["pending"])

        return {
            "total_earnings": earnings,
            "commission_rate": self.commission_rate,
            "commission_paid": commission,
            "net_earnings": net,
            "completed_payouts": completed,
            "pending_payouts": pending,
            "available_balance": max(round(net - completed - pending, 2), 0.0),
            "next_payout_date": next_payout_date(today).isoformat(),
        }

    def list_payouts(self, seller_id: str) -> List[Dict[str, Any]]:
        return [self._payout_row(p) for p in self.payout_repo.find_by_seller(seller_id)]

    @staticmethod
    def _payout_row(payout: Payout) -> Dict[str, Any]:
        data = payout.to_dict()
        data["date"] = payout.created_at.date().isoformat() if payout.created_at else None
        return data

    def request_payout(self, seller_id: str, amount, method: str = "bank_transfer") -> Dict[str, Any]:
        """
        Queue a payout of at most the available balance

        Raises:
            PayoutRejected: amount not positive or above the available balance
        """
        try:
            amount = Decimal(str(amount))
        except InvalidOperation:
            raise PayoutRejected("Invalid payout amount")

        if amount <= 0:
            raise PayoutRejected("Payout amount must be greater than zero")

        available = Decimal(str(self.get_financial_summary(seller_id)["available_balance"]))
        if amount > available:
            raise PayoutRejected(f"Requested amount exceeds available balance ({available:.2f})")

        reference = f"PAY-{int(datetime.now(timezone.utc).timestamp() * 1000)}"
        payout = self.payout_repo.create(seller_id, amount, method, reference)
        logger.info(f"Payout {reference} of {amount} requested by seller {seller_id}")
        return self._payout_row(payout)

    def export_payouts(self, seller_id: str) -> str:
        """Payout history as CSV (Date, Amount, Method, Reference, Status)"""
        rows = self.list_payouts(seller_id)
        frame = pd.DataFrame(rows, columns=list(PAYOUT_EXPORT_COLUMNS))
        frame["amount"] = frame["amount"].map(lambda v: f"{v:.2f}")
        frame["status"] = frame["status"].str.upper()
        return frame.rename(columns=PAYOUT_EXPORT_COLUMNS).to_csv(index=False)
