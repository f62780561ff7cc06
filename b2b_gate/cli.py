"""Command-line wrapper around the visibility service.

    b2b-gate evaluate --snapshot catalog.json --product-id 42   -> active|inactive
    b2b-gate evaluate --snapshot catalog.json --cart            -> valid|invalid
    b2b-gate evaluate --snapshot catalog.json                   -> active|inactive (context)

Exit code 0 on a successful evaluation, 1 on any B2BGateError, 2 on usage errors.
"""

import argparse
import logging
import sys

from b2b_gate.config import get_settings
from b2b_gate.core.errors import B2BGateError
from b2b_gate.infrastructure.observability import setup_logging
from b2b_gate.infrastructure.snapshot import load_snapshot
from b2b_gate.services.visibility import VisibilityService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="b2b-gate", description="B2B content visibility evaluator",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    evaluate = subparsers.add_parser(
        "evaluate", help="Evaluate a product, the current cart, or the browsing context",
    )
    evaluate.add_argument(
        "--snapshot", default=None,
        help="Catalog snapshot JSON (default: B2B_GATE_SNAPSHOT_PATH)",
    )
    target = evaluate.add_mutually_exclusive_group()
    target.add_argument("--product-id", type=int, default=None)
    target.add_argument("--cart", action="store_true")
    evaluate.add_argument("--log-level", default=None)
    return parser


def run_evaluate(args: argparse.Namespace) -> str:
    settings = get_settings()
    service = VisibilityService(load_snapshot(args.snapshot or settings.snapshot_path))
    if args.cart:
        valid, _ = service.cart_valid()
        return "valid" if valid else "invalid"
    if args.product_id is not None:
        active = service.product_active(args.product_id)
    else:
        active = service.context_active()
    return "active" if active else "inactive"


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.log_level, settings.log_format)
    try:
        result = run_evaluate(args)
    except B2BGateError as e:
        logger.error(e.message, extra={"error_code": e.code})
        print(f"error: {e.message}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
