#!/usr/bin/env python3
"""
Watch a seller dashboard from the terminal

Logs in through the public API and keeps the orders list and dashboard
stats refreshed on the standard polling intervals until interrupted.

Usage:
    python scripts/watch_dashboard.py --email seller@example.com --password ...
"""
import argparse
import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

# Load environment
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from seller_panel.connectors import SellerApiClient
from seller_panel.services.dashboard_poller import seller_dashboard_poller

logger = logging.getLogger("watch_dashboard")


def show_orders(data):
    orders = data.get("orders", [])
    logger.info(f"Orders: {len(orders)} on this page, {data.get('pagination', {}).get('total', '?')} total")


def show_dashboard(data):
    stats = data.get("stats", {})
    logger.info(
        f"Revenue {stats.get('totalRevenue', 0):.2f} | "
        f"Orders {stats.get('totalOrders', 0)} | "
        f"Products {stats.get('totalProducts', 0)}"
    )


def show_error(job_name, error):
    logger.error(f"{job_name} refresh failed: {error}")


async def watch(base_url: str, email: str, password: str) -> None:
    async with SellerApiClient(base_url=base_url or None) as client:
        await client.login(email, password)

        poller = seller_dashboard_poller(
            client,
            on_orders=show_orders,
            on_dashboard=show_dashboard,
            on_error=show_error,
        )
        poller.start()
        try:
            # Runs until cancelled (Ctrl+C)
            await asyncio.Event().wait()
        finally:
            await poller.stop()
            await client.logout()


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    parser = argparse.ArgumentParser(description='Poll the seller dashboard')
    parser.add_argument('--email', required=True)
    parser.add_argument('--password', required=True)
    parser.add_argument('--api-url', default='', help='Defaults to API_URL from settings')
    args = parser.parse_args()

    try:
        asyncio.run(watch(args.api_url, args.email, args.password))
    except KeyboardInterrupt:
        logger.info("Stopped")
