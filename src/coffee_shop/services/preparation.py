"""
Preparation service.

Simulates making a coffee as a fixed, strictly sequential series of timed
steps: wait, add milk, wait, add syrup, wait, coffee ready. Each wait goes
through an injectable `sleep` coroutine (asyncio.sleep by default), so tests
can replace it and a cancelled wait can be caught at the step boundary.

A cancelled wait aborts the remaining steps and surfaces as
`PreparationInterrupted`, never as a bare `asyncio.CancelledError`.
Preparation is not retried.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from coffee_shop.domain.errors import PreparationInterrupted
from coffee_shop.domain.models import Order, PreparationDelays, PreparationResult, PreparationState

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]
Announce = Callable[[str], None]


class PreparationService:
    """Runs the preparation sequence for one order at a time."""

    def __init__(
        self,
        delays: PreparationDelays | None = None,
        sleep: Sleep = asyncio.sleep,
        announce: Announce = print,
    ) -> None:
        self.delays = delays or PreparationDelays()
        self.sleep = sleep
        self.announce = announce

    async def _wait(self, seconds: float, order: Order, state: PreparationState) -> None:
        try:
            await self.sleep(seconds)
        except asyncio.CancelledError:
            logger.warning("Preparation cancelled at %s", state.value)
            raise PreparationInterrupted(order, state) from None

    async def prepare(self, order: Order) -> PreparationResult:
        logger.info("Preparing order: %s", order)
        state = PreparationState.IDLE
        self.announce("Preparing your coffee...")

        steps = (
            (self.delays.initial, PreparationState.ADDING_MILK, f"Adding: {order.milk.display_name}"),
            (self.delays.milk, PreparationState.ADDING_SYRUP, f"Adding: {order.syrup.display_name}"),
            (self.delays.syrup, PreparationState.READY, f"Coffee {order.coffee.display_name} is ready!"),
        )
        for delay, next_state, message in steps:
            await self._wait(delay, order, state)
            state = next_state
            logger.debug("Order reached %s", state.value)
            self.announce(message)

        logger.info("Preparation complete for order: %s", order)
        return PreparationResult(order=order, state=state)
