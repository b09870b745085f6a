#!/usr/bin/env python3
"""Simple CLI for preparing enforcement swaps locally"""

import argparse
import asyncio
import json

from uncensored_l2.core.enforcement import EnforcementError, format_units
from uncensored_l2.logging_config import setup_logging
from uncensored_l2.services.swap_builder import get_chain_registry, get_swap_builder


def print_prepared(prepared, as_json: bool = False):
    """Pretty print a prepared swap"""
    params = prepared.params
    if as_json:
        print(json.dumps(params.as_list()))
        return

    print(f"\n🛡️  Enforcement swap on {prepared.chain.display_name or prepared.chain.name}")
    print("=" * 50)
    print(f"Proxy (L1 target): {params.proxy_address}")
    print(f"Router (L2 to):    {params.router_address}")
    print(f"Value (wei):       {params.amount_in_with_fee}")
    print(f"  quoted input:    {format_units(prepared.quote.amount_in.raw_value, 18)} ETH")
    print(f"  surcharge:       {prepared.fee.fee} wei ({prepared.fee.fee_rate_per_mille}‰)")
    print(f"Gas limit:         {params.gas_limit}")
    print(f"Contract creation: {params.is_contract_creation}")
    print(f"Deadline:          {prepared.quote.deadline}")
    print(f"Data:              {params.calldata}")


async def cli_swap(chain: str, token: str, amount: str, recipient: str, as_json: bool):
    """CLI command to prepare one enforcement swap"""
    builder = get_swap_builder()
    try:
        prepared = await builder.build(chain, token, amount, recipient)
    except EnforcementError as e:
        print(f"❌ {e.kind}: {e.message}")
        return 1
    print_prepared(prepared, as_json)
    return 0


def cli_chains():
    for config in get_chain_registry().configs.values():
        data = config.to_dict()
        print(f"{data['chain']:<12} chain_id={data['chain_id']:<6} router={data['router_address']} proxy={data['proxy_address']}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="UncensoredL2 CLI")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command")

    swap_parser = subparsers.add_parser("swap", help="Prepare enforcement parameters for an ETH → token swap")
    swap_parser.add_argument("chain", help="optimism, base, soneium, modeNetwork or ink")
    swap_parser.add_argument("token", help="Token address to buy")
    swap_parser.add_argument("amount", help="Token amount as a decimal string")
    swap_parser.add_argument("recipient", help="Address receiving the tokens")
    swap_parser.add_argument("--json", action="store_true", help="Print the raw 6-item parameter list")

    subparsers.add_parser("chains", help="List supported chains and contracts")

    return parser


async def main():
    parser = build_parser()
    args = parser.parse_args()
    setup_logging(args.log_level)

    if not args.command:
        parser.print_help()
        return 0

    command = args.command.lower()

    if command == "swap":
        return await cli_swap(args.chain, args.token, args.amount, args.recipient, args.json)

    if command == "chains":
        cli_chains()
        return 0

    print(f"❌ Unknown command: {command}")
    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
