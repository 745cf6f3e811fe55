#!/usr/bin/env python3
"""
Mount the storefront against a running catalog service and print the page.

Start the API first (in another terminal):
  python scripts/run_server.py

Then:
  python scripts/run_storefront.py
  python scripts/run_storefront.py --base-url http://127.0.0.1:5000 --fail-image 2 --fail-image 5
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from shopsmart.client.http_client import CatalogApiClient
from shopsmart.client.shell import StorefrontShell
from shopsmart.client.terminal import render_page_text
from shopsmart.utils.config_loader import load_shop_config


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


async def run(base_url: str, timeout_seconds, failed_images) -> str:
    shell = StorefrontShell(CatalogApiClient(base_url=base_url, timeout_seconds=timeout_seconds))
    await shell.mount()
    for product_id in failed_images:
        shell.dashboard.handle_image_error(product_id)
    page = shell.render()
    shell.unmount()
    return render_page_text(page)


def main() -> int:
    parser = argparse.ArgumentParser(description="Render the ShopSmart storefront in the terminal")
    parser.add_argument("--base-url", default=None, help="Catalog service URL (default: client.base_url from config)")
    parser.add_argument("--config", type=Path, default=None, help="Path to shop_config.yml")
    parser.add_argument("--fail-image", type=int, action="append", default=[], metavar="ID", help="Simulate an image load failure for a product id")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args()

    setup_logging(args.verbose)
    cfg = load_shop_config(args.config)
    base_url = args.base_url or cfg.client.base_url

    print(asyncio.run(run(base_url, cfg.client.timeout_seconds, args.fail_image)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
