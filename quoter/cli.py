"""Command-line quoting against a pool snapshot file.

Usage:
    quoter snapshot.json --input-mint MINT_A --output-mint MINT_B --amount 10000000000
    quoter snapshot.json --input-mint MINT_A --output-mint MINT_B --amount 1 --describe
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import structlog
from pydantic import ValidationError

from quoter.engine import get_default_engine
from quoter.errors import InvalidSnapshotError, QuoteRejected
from quoter.log_config import configure_logging
from quoter.models.api import QuoteModel, RejectionModel, TradeLegModel
from quoter.models.quote import QuoteRequest
from quoter.models.snapshot import load_snapshot
from quoter.models.types import validate_u64

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quoter",
        description="Quote a swap against a pool snapshot JSON file",
    )
    parser.add_argument("snapshot", type=Path, help="Path to the pool snapshot JSON")
    parser.add_argument("--input-mint", required=True, help="Mint of the asset to sell")
    parser.add_argument("--output-mint", required=True, help="Mint of the asset to buy")
    parser.add_argument(
        "--amount", required=True, type=validate_u64, help="Raw input amount (u64)"
    )
    parser.add_argument(
        "--describe",
        action="store_true",
        help="Print the settlement legs instead of a quote",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        with open(args.snapshot) as f:
            snapshot = load_snapshot(json.load(f))
    except (OSError, json.JSONDecodeError, ValidationError, InvalidSnapshotError) as e:
        logger.error("snapshot_load_failed", path=str(args.snapshot), error=str(e))
        return 1

    request = QuoteRequest(
        input_mint=args.input_mint,
        output_mint=args.output_mint,
        amount=args.amount,
    )
    engine = get_default_engine()

    try:
        if args.describe:
            legs = engine.describe_trade(snapshot, request)
            payload = {
                "legs": [TradeLegModel.from_leg(leg).model_dump(by_alias=True) for leg in legs]
            }
        else:
            result = engine.quote(snapshot, request)
            payload = {"quote": QuoteModel.from_result(result).model_dump(by_alias=True)}
    except QuoteRejected as e:
        payload = {"rejection": RejectionModel.from_error(e).model_dump(mode="json")}
        print(json.dumps(payload, indent=2))
        return 1

    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
