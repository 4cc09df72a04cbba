from __future__ import annotations

from returns.result import Success

from order_patterns.adapters.inbound.demos import DEMOS
from order_patterns.settings import CheckoutSettings


def run_cli(demo_name: str, settings: CheckoutSettings) -> int:
    """
    Run one demo (or "all") and print its receipt.
    Exit codes: 0 ok, 1 checkout failed, 2 unknown demo.
    """
    if demo_name == "all":
        codes = [run_cli(name, settings) for name in DEMOS]
        return max(codes)

    demo = DEMOS.get(demo_name)
    if demo is None:
        print(f"unknown_demo: {demo_name}")
        return 2

    print(f"=== {demo_name} ===")
    result = demo(settings)

    if isinstance(result, Success):
        receipt = result.unwrap()
        print(
            "[ok]",
            {
                "order_id": receipt.order_id,
                "subtotal": str(receipt.subtotal),
                "shipping": str(receipt.shipping),
                "tax": str(receipt.tax),
                "total": str(receipt.total),
            },
        )
        return 0

    err = result.failure()
    print("[ng]", str(err))
    return 1
