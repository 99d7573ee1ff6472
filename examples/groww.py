"""
groww-connect: Getting Started
==============================

This example walks through the public API:
  1. Create a client
  2. Instrument search
  3. Margin and portfolio
  4. Historical candles
  5. Order placement (commented out)
  6. Handling API and rate-limit errors

Prerequisites
-------------
1. Install the library (from the repository root):
       pip install -e .

2. Generate an API key from your Groww trading API dashboard.

3. Set the environment variable (or .env file):
       export GROWW_API_KEY=your_api_key

Run
---
    python examples/groww.py
"""

import logging
import os
import sys
from datetime import date, timedelta
from pathlib import Path

from groww_connect import GrowwApiError, GrowwClient, GrowwRateLimitError


# ---------------------------------------------------------------------------
# Load .env if present
# ---------------------------------------------------------------------------


def _load_env() -> None:
    env_file = Path(__file__).parent.parent / ".env"
    if not env_file.exists():
        return
    for line in env_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        os.environ.setdefault(key.strip(), value.strip())


_load_env()

API_KEY = os.environ.get("GROWW_API_KEY", "")

if not API_KEY:
    sys.exit("Set GROWW_API_KEY before running this example.")

logging.basicConfig(level=logging.INFO)


def main() -> None:
    with GrowwClient(API_KEY) as groww:
        # Request/response logging goes to the "groww_connect.transport" logger
        # with the API key masked.
        groww.set_logging(os.environ.get("GROWW_DEBUG") == "1")

        print("Searching for RELIANCE...")
        print(groww.instruments.search("RELIANCE"))

        print("\nAvailable margin:")
        print(groww.margin.available())

        print("\nHoldings:")
        print(groww.portfolio.holdings())

        print("\nLast 30 days of daily candles:")
        end = date.today()
        print(groww.historical_data.candles("RELIANCE-EQ", "1d", end - timedelta(days=30), end))

        order = {
            "validity": "DAY",
            "exchange": "NSE",
            "transaction_type": "BUY",
            "order_type": "MARKET",
            "price": 0,
            "product": "CNC",
            "quantity": 1,
            "segment": "CASH",
            "trading_symbol": "RELIANCE-EQ",
        }
        print("\nMargin required for a 1-share market buy:")
        print(groww.margin.required(order))
        # Uncomment to actually place the order
        # print(groww.orders.create(order))


if __name__ == "__main__":
    try:
        main()
    except GrowwRateLimitError as e:
        print(f"Rate limited ({e.code}); retry after {e.wait_time}s")
    except GrowwApiError as e:
        print(f"Error occurred: {e.message}")
        print(f"Error code: {e.code}")
