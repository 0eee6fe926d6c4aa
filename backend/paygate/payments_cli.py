#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.paygate.logging_config import configure_structlog, get_logger  # noqa: E402
from backend.paygate.payments import (  # noqa: E402
    PaymentError,
    PaymentProvider,
    ProviderConfigurationError,
    create_payment_provider,
)
from backend.paygate.payments.factory import PROVIDER_NAMES  # noqa: E402

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Exercise a payment provider by hand.")
    parser.add_argument(
        "--provider",
        choices=PROVIDER_NAMES,
        default=None,
        help="Provider to use (defaults to PAYMENT_PROVIDER)",
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    sub = parser.add_subparsers(dest="command", required=True)

    charge = sub.add_parser("charge", help="Charge a payment source")
    charge.add_argument("--amount", type=int, required=True, help="Amount in minor units")
    charge.add_argument("--currency", required=True)
    charge.add_argument("--source", required=True, help="Card token or account reference")

    refund = sub.add_parser("refund", help="Refund a previous charge")
    refund.add_argument("--charge-id", required=True)
    refund.add_argument("--amount", type=int, required=True, help="Amount in minor units")

    subscribe = sub.add_parser("subscribe", help="Start a subscription")
    subscribe.add_argument("--customer-id", required=True)
    subscribe.add_argument("--plan-id", required=True)
    return parser


def _run(provider: PaymentProvider, args: argparse.Namespace) -> dict:
    if args.command == "charge":
        result = provider.charge(
            amount_minor=args.amount, currency=args.currency, source=args.source
        )
        return result.model_dump()
    if args.command == "refund":
        provider.refund(charge_id=args.charge_id, amount_minor=args.amount)
        return {"charge_id": args.charge_id, "amount_minor": args.amount, "refunded": True}
    subscription = provider.create_subscription(
        customer_id=args.customer_id, plan_id=args.plan_id
    )
    return subscription.model_dump()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_structlog()

    try:
        provider = create_payment_provider(args.provider)
    except ProviderConfigurationError as exc:
        print(f"config error: {exc}", file=sys.stderr)
        return 2

    try:
        payload = _run(provider, args)
    except PaymentError as exc:
        logger.warning(
            "payment_operation_failed",
            provider=provider.name,
            command=args.command,
            kind=exc.kind.value,
        )
        print(f"error: {exc.kind.value}: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for key, value in payload.items():
            print(f"{key}: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
