"""
Lead Intent Scoring Engine - Main Entry Point
=============================================
Run this file to start the FastAPI server.

Usage:
    python main.py                    # Start server on port 8000
    python main.py --port 8080        # Start server on custom port
    python main.py --reload           # Start with auto-reload (dev mode)

API Documentation:
    http://localhost:8000/docs        # Swagger UI
    http://localhost:8000/redoc       # ReDoc
"""

import argparse
import logging
import os

import uvicorn
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from lead_scoring.logger import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Lead Intent Scoring API Server")
    parser.add_argument(
        "--host",
        type=str,
        default="0.0.0.0",
        help="Host to bind the server to (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", "8000")),
        help="Port to run the server on (default: 8000 or $PORT)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: $LOG_LEVEL or INFO)",
    )

    args = parser.parse_args()

    logger = setup_logging(args.log_level)
    llm_key_set = bool(os.getenv("LLM_API_KEY") or os.getenv("GROQ_API_KEY")
                       or os.getenv("OPENAI_API_KEY") or os.getenv("OPENROUTER_API_KEY"))
    logger.info("Starting Lead Intent Scoring API on http://%s:%d", args.host, args.port)
    logger.info("API docs: http://localhost:%d/docs", args.port)
    if not llm_key_set:
        logger.warning("No LLM API key found; POST /score will be rejected")

    uvicorn.run(
        "lead_scoring.api.endpoints:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=logging.getLevelName(logger.level).lower(),
    )


if __name__ == "__main__":
    main()
