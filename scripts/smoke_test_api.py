#!/usr/bin/env python3
"""
Smoke test for a running catalog service: health, product list, product lookup.

Start the API first (in another terminal):
  python scripts/run_server.py

Then run this script:
  python scripts/smoke_test_api.py
  python scripts/smoke_test_api.py --base-url http://127.0.0.1:5000 --product-id 4

If you see "Connection refused", the API is not running; start it as above.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, Tuple

import requests


def get_json(url: str, timeout: int = 10) -> Tuple[int, Dict[str, Any]]:
    r = requests.get(url, timeout=timeout)
    return r.status_code, r.json()


def main() -> int:
    parser = argparse.ArgumentParser(description="Smoke test the ShopSmart catalog API")
    parser.add_argument("--base-url", default="http://localhost:5000", help="API base URL")
    parser.add_argument("--product-id", type=int, default=1, help="Product id to look up")
    args = parser.parse_args()
    base = args.base_url.rstrip("/")

    print("=== ShopSmart API smoke test ===\n")
    print(f"Base URL: {base}\n")

    print("1) GET /api/health")
    try:
        status, body = get_json(f"{base}/api/health")
    except requests.RequestException as e:
        print(f"   FAIL: {e}")
        if "Connection refused" in str(e) or "Failed to establish" in str(e):
            print("   → Start the API first: python scripts/run_server.py")
        return 1
    print(f"   {status} status={body.get('status')} message={body.get('message')!r} timestamp={body.get('timestamp')}\n")

    print("2) GET /api/products")
    try:
        status, body = get_json(f"{base}/api/products")
    except requests.RequestException as e:
        print(f"   FAIL: {e}\n")
        return 1
    print(f"   {status} success={body.get('success')} count={body.get('count')}")
    for p in body.get("data") or []:
        stock = "in stock" if p.get("inStock") else "out of stock"
        print(f"   - #{p.get('id')} {p.get('name')} ${float(p.get('price', 0)):.2f} ({stock})")
    print()

    print(f"3) GET /api/products/{args.product_id}")
    try:
        status, body = get_json(f"{base}/api/products/{args.product_id}")
    except requests.RequestException as e:
        print(f"   FAIL: {e}\n")
        return 1
    if body.get("success"):
        print(f"   {status} {body['data'].get('name')}\n")
    else:
        print(f"   {status} {body.get('message')}\n")

    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
