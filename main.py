"""
Prospect ICP Engine - Main Entry Point
======================================
Run this file to start the FastAPI server.

Usage:
    python main.py                    # Start server on ICP_API_HOST:ICP_API_PORT
    python main.py --port 8080        # Start server on custom port
    python main.py --reload           # Start with auto-reload (dev mode)

API Documentation:
    http://localhost:8000/docs        # Swagger UI
    http://localhost:8000/redoc       # ReDoc
"""

import argparse
import uvicorn

from prospect_icp import __version__
from prospect_icp.config.settings import API_CONFIG, LOG_LEVEL
from prospect_icp.config.logging import get_logger

logger = get_logger("prospect_icp.main")


def main():
    parser = argparse.ArgumentParser(description="Prospect ICP Engine API Server")
    parser.add_argument(
        "--host",
        type=str,
        default=API_CONFIG["host"],
        help=f"Host to bind the server to (default: {API_CONFIG['host']})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=API_CONFIG["port"],
        help=f"Port to run the server on (default: {API_CONFIG['port']})",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of worker processes (default: 1)",
    )

    args = parser.parse_args()

    logger.info(
        "Prospect ICP Engine %s starting on http://%s:%s (docs at /docs)",
        __version__,
        args.host,
        args.port,
    )

    uvicorn.run(
        "prospect_icp.api.endpoints:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=args.workers if not args.reload else 1,
        log_level=LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
