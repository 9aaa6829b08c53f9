from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog
import yaml

from gridscaler.domain.entities import DemandMetric, GridFetchError, ScalerConfigError
from gridscaler.infrastructure.config import AppConfig, load_config
from gridscaler.infrastructure.logging.setup import configure_logging
from gridscaler.interfaces.composition import grid_demand

log = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_GRID_ERROR = 2


def _parse_args(argv: Iterable[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gridscaler",
        description="Compute Selenium Grid node demand for one browser.",
    )

    # Config wiring flags
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file.",
    )
    parser.add_argument(
        "--dotenv",
        default=None,
        help="Path to .env file.",
    )

    # Trigger metadata
    parser.add_argument("--url", default=None, help="Grid GraphQL endpoint.")
    parser.add_argument("--browser-name", default=None, help="Target browser name.")
    parser.add_argument(
        "--browser-version",
        default=None,
        help="Target browser version (default: latest).",
    )
    parser.add_argument(
        "--unsafe-ssl",
        action="store_true",
        default=None,
        help="Skip TLS certificate verification.",
    )
    parser.add_argument(
        "--scaler-index",
        default=None,
        type=int,
        help="Trigger index used for metric naming.",
    )

    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level.",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "console"],
        help="Override log format.",
    )

    return parser.parse_args(argv)


def _cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.url:
        overrides["url"] = args.url
    if args.browser_name:
        overrides["browser_name"] = args.browser_name
    if args.browser_version:
        overrides["browser_version"] = args.browser_version
    if args.unsafe_ssl:
        overrides["unsafe_ssl"] = "true"
    if args.scaler_index is not None:
        overrides["scaler_index"] = args.scaler_index
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.log_format:
        overrides["log_format"] = args.log_format
    return overrides


def render_metric(metric: DemandMetric) -> str:
    return json.dumps(
        {
            "metricName": metric.metric_name,
            "value": metric.value,
            "isActive": metric.is_active,
        }
    )


async def evaluate(config: AppConfig) -> DemandMetric:
    async with grid_demand(config) as use_case:
        return await use_case.get_metric()


def start(argv: Iterable[str] | None = None) -> int:
    """
    Process entrypoint: run one evaluation cycle and print the metric.
    """
    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)

    # pydantic's ValidationError is a ValueError; YAML errors are not.
    try:
        config = load_config(
            config_path=Path(args.config) if args.config else None,
            dotenv_path=Path(args.dotenv) if args.dotenv else None,
            cli_overrides=_cli_overrides(args),
        )
    except (ValueError, OSError, yaml.YAMLError) as e:
        configure_logging(AppConfig())
        log.error("invalid_config", error=str(e))
        return EXIT_CONFIG_ERROR
    configure_logging(config)

    try:
        metric = asyncio.run(evaluate(config))
    except ScalerConfigError as e:
        log.error("invalid_scaler_metadata", error=str(e))
        return EXIT_CONFIG_ERROR
    except GridFetchError as e:
        log.error("grid_query_failed", url=e.url, error=str(e))
        return EXIT_GRID_ERROR

    print(render_metric(metric))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(start())
