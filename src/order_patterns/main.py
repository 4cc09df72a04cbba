from __future__ import annotations

import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from order_patterns.adapters.inbound.cli import run_cli
from order_patterns.adapters.inbound.demos import DEMOS
from order_patterns.log import configure_logging
from order_patterns.settings import load_settings


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(f"usage: order-patterns <{'|'.join(DEMOS)}|all>")
        return 2

    load_dotenv()
    try:
        settings = load_settings()
    except ValidationError as e:
        print(f"invalid_config: {e}")
        return 2

    configure_logging(settings.log_level)
    return run_cli(argv[0], settings)


if __name__ == "__main__":
    raise SystemExit(main())
