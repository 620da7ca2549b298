#!/usr/bin/env python3
"""
Basic Usage Example - fsm-steps

This script drives an order record through a small handler table. It shows how to:
- Build a stepper from state handlers and a catch handler
- Create a record with make_state
- Loop until a handler marks the record done
- Recover from a failing state through the catch handler

Run: python examples/basic_usage.py
"""

import asyncio
import json
import random

from fsm_steps import make_state, make_stepper
from fsm_steps.logging import configure_logging


async def start(order, attempts):
    order.data["attempts"] = 0
    return "Charge"


async def charge(order, attempts):
    order.data["attempts"] += 1
    await asyncio.sleep(0.05)
    if random.random() < 0.5:
        raise ConnectionError("payment gateway timeout")
    return "Ship"


async def ship(order, attempts):
    order.data["tracking"] = f"TRK-{order.data['order_id']}"
    order.done = True


async def failed(order, attempts):
    order.done = True


async def on_error(error, order, attempts):
    """Retry charging until the attempt budget runs out."""
    order.data["last_error"] = str(error)
    if order.data["attempts"] < attempts:
        return "Charge"
    return "Failed"


async def main():
    configure_logging(level="INFO")

    step = make_stepper(
        {"Start": start, "Charge": charge, "Ship": ship, "Failed": failed},
        catch=on_error,
    )

    order = make_state({"order_id": "ord-1001"})
    while not order.done:
        order = await step(order, 3)

    print(json.dumps(order.to_dict(), indent=2))


if __name__ == "__main__":
    asyncio.run(main())
