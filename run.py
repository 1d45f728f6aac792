#!/usr/bin/env python3
"""
Deep Thought - Server Startup Script

Usage:
    python run.py [--host HOST] [--port PORT] [--stats-dir DIR] [--strict] [--reload]
"""

import argparse
import os
import uvicorn

from deepthought.config import ENV_PREFIX, load_config


def main():
    config = load_config()

    parser = argparse.ArgumentParser(description="Deep Thought poker agent")
    parser.add_argument("--host", default=config.host, help="Host to bind to")
    parser.add_argument("--port", type=int, default=config.port, help="Port to bind to")
    parser.add_argument("--stats-dir", default=None, help="Directory with <n>players.stat files")
    parser.add_argument("--strict", action="store_true", help="Fail on unhandled phases instead of folding")
    parser.add_argument("--log-level", default=None, help="Logging level")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    args = parser.parse_args()

    # create_app reads its configuration from the environment
    if args.stats_dir:
        os.environ[ENV_PREFIX + "STATS_DIR"] = args.stats_dir
    if args.strict:
        os.environ[ENV_PREFIX + "STRICT"] = "true"
    if args.log_level:
        os.environ[ENV_PREFIX + "LOG_LEVEL"] = args.log_level

    uvicorn.run(
        "deepthought.server.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
