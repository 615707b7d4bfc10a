#!/usr/bin/env python3
"""Mint a bearer token for an operator.

Operator accounts are managed elsewhere; this is for administrators and
local development.
"""

import argparse
import sys
from uuid import UUID, uuid4

from hunt.config import Settings
from hunt.util.jwt import create_token


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("email", help="Operator login email")
    parser.add_argument(
        "--operator-id",
        type=UUID,
        default=None,
        help="Operator ID (default: a new random ID)",
    )
    args = parser.parse_args()

    settings = Settings()
    operator_id = args.operator_id or uuid4()
    token = create_token(str(operator_id), args.email, settings.auth)

    print(f"Operator ID: {operator_id}", file=sys.stderr)
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
