#!/usr/bin/env python3
"""
Run the ShopSmart catalog service under uvicorn.

  python scripts/run_server.py
  python scripts/run_server.py --port 8080 --config config/shop_config.yml
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn
from dotenv import load_dotenv

load_dotenv()


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the ShopSmart catalog service")
    parser.add_argument("--host", default=None, help="Bind address (default: server.host from config)")
    parser.add_argument("--port", type=int, default=None, help="Port (default: server.port from config)")
    parser.add_argument("--config", type=Path, default=None, help="Path to shop_config.yml")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.config is not None:
        # Read by shopsmart.api.main at import time
        os.environ["SHOPSMART_CONFIG"] = str(args.config)

    from shopsmart.utils.config_loader import load_shop_config

    cfg = load_shop_config(args.config)
    host = args.host or cfg.server.host
    port = args.port or cfg.server.port

    uvicorn.run("shopsmart.api.main:app", host=host, port=port, reload=args.reload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
