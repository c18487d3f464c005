"""
GPS Location Tracker Backend
============================

Entry point. Run with:

    python main.py <mongo-url> <username> <password> [--tls-insecure] [--host H] [--port P]

All other settings come from the environment / ``.env`` (see
``src/config.py``).
"""

import argparse

import uvicorn

from src.api.app import create_app
from src.config import Settings, settings


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("url", help="MongoDB connection string")
    parser.add_argument("username", help="MongoDB user (authenticated against admin)")
    parser.add_argument("password", help="MongoDB password")
    parser.add_argument(
        "--tls-insecure",
        action="store_true",
        help="connect over TLS without verifying the server certificate",
    )
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """CLI arguments override the Mongo URL, credentials and TLS mode."""
    return settings.model_copy(
        update={
            "mongo_url": args.url,
            "mongo_username": args.username,
            "mongo_password": args.password,
            "mongo_tls_insecure": args.tls_insecure or settings.mongo_tls_insecure,
        }
    )


def main(argv=None) -> None:
    args = parse_args(argv)
    uvicorn.run(create_app(build_settings(args)), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
