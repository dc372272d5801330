# src/cli.py
"""
Token pulse from the shell.
Run: python -m src.cli <address> [<address> ...] [--summary]

Examples:
    python -m src.cli 0x4dc5f49fc95427b984f27db843755787589314c0
    python -m src.cli 0xA 0xB --summary
"""
import argparse
import json
import sys

from src.errors import ValidationError
from src.routes.pulse import parse_addresses
from src.services.pulse import get_batch_pulse
from src.services.pulse_format import format_pulse_summary, render_response


def main(argv=None):
    parser = argparse.ArgumentParser(description='Token pulse lookup')
    parser.add_argument('addresses', nargs='*', help='Token addresses')
    parser.add_argument('-s', '--summary', action='store_true', help='Print one summary line per token')
    parser.add_argument('--base-url', help='DexScreener API base (default: DEXSCREENER_API_BASE)')

    args = parser.parse_args(argv)

    try:
        addresses = parse_addresses(None, ",".join(args.addresses))
    except ValidationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2

    results = get_batch_pulse(addresses, base_url=args.base_url)

    if args.summary:
        for r in results:
            print(format_pulse_summary(r))
    else:
        print(json.dumps(render_response(results), indent=2, ensure_ascii=False))

    return 1 if any(r.error for r in results) else 0


if __name__ == '__main__':
    sys.exit(main())
