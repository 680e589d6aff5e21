"""
Coffee shop coordinator.

The shop accepts an order, has the preparation service make it, and serves
it. There is one logical shop per process; get it from
`ServiceFactory.get_coffee_shop()` and pass it to whoever needs it rather
than constructing new ones.
"""

import logging

from coffee_shop.domain.errors import PreparationInterrupted
from coffee_shop.domain.models import Order, PreparationResult
from coffee_shop.services.preparation import Announce, PreparationService

logger = logging.getLogger(__name__)


class CoffeeShop:
    """Accepts, prepares and serves orders, one at a time.

    `place_order` is awaited to completion by the caller, so orders are
    serialized by construction and no locking is needed.
    """

    def __init__(self, preparation: PreparationService, announce: Announce = print) -> None:
        self.preparation = preparation
        self.announce = announce

    async def place_order(self, order: Order) -> PreparationResult:
        logger.info("Order accepted: %s", order)
        self.announce(f"Order accepted: {order}")
        return await self.prepare_order(order)

    async def prepare_order(self, order: Order) -> PreparationResult:
        """Run the preparation sequence, reporting an interruption instead of raising it."""
        try:
            return await self.preparation.prepare(order)
        except PreparationInterrupted as exc:
            logger.warning("%s", exc)
            self.announce("Error while preparing coffee.")
            return PreparationResult(order=order, state=exc.state, interrupted=True)

    def serve_order(self, order: Order) -> None:
        # Serves even when the last preparation was interrupted.
        logger.info("Serving order: %s", order)
        self.announce(f"Your coffee is ready: {order}")
