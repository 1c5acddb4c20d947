"""
Server entry point

Usage:
    python -m ledger_api [--host HOST] [--port PORT] [--demo-accounts N]
"""

import argparse

import uvicorn

from ledger_api.api import create_app
from ledger_api.config import LedgerConfig
from ledger_api.exceptions import ConfigurationError
from ledger_api.generators import populate_store
from ledger_api.logging import get_logger, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the ledger HTTP server")
    parser.add_argument("--host", help="Bind address (env LEDGER_HOST)")
    parser.add_argument("--port", type=int, help="Bind port (env LEDGER_PORT)")
    parser.add_argument("--log-level", help="Log level (env LOG_LEVEL)")
    parser.add_argument(
        "--demo-accounts",
        type=int,
        help="Populate the store with N generated accounts (env DEMO_ACCOUNTS)",
    )
    parser.add_argument(
        "--transactions-per-account",
        type=int,
        default=10,
        help="Transactions per generated account (default: 10)",
    )
    parser.add_argument("--seed", type=int, help="Random seed for generated data (env SEED)")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def build_config(args: argparse.Namespace) -> LedgerConfig:
    """Environment config overridden by command-line flags."""
    config = LedgerConfig.from_env()
    if args.host:
        config.server.host = args.host
    if args.port is not None:
        config.server.port = args.port
    if args.log_level:
        config.log_level = args.log_level
    if args.demo_accounts is not None:
        config.demo_accounts = args.demo_accounts
    if args.seed is not None:
        config.seed = args.seed
    config.validate()
    return config


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = build_config(args)
    except ConfigurationError as e:
        # exits with status 2 and the usage line
        parser.error(str(e))
    setup_logging(config.log_level, config.log_format)
    logger = get_logger("ledger_api")

    app = create_app(config)
    if config.demo_accounts:
        populate_store(
            app.state.store,
            app.state.engine,
            config.demo_accounts,
            args.transactions_per_account,
            seed=config.seed,
        )

    logger.info("Serving ledger on %s", config.server.base_url)
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)


if __name__ == "__main__":
    main()
