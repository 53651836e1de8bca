"""Simulated orders placed through checkout"""

import uuid
import logging
from datetime import datetime, timezone
from typing import Optional

from cart_engine import CartStore, item_cost

from ..models.checkout import ContactDetails, Order, OrderItem, OrderStatus

logger = logging.getLogger(__name__)


class OrderDatabase:
    """Orders kept in memory, keyed by order number"""

    def __init__(self):
        self.orders: dict[str, Order] = {}

    def create_order(
        self,
        cart: CartStore,
        contact: ContactDetails,
        payment_last_four: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> Order:
        """
        Freeze the cart's current lines into an order.

        Line totals and the order total are taken from the cart pricing,
        so rentals keep the day count they were added with.
        """
        lines = [OrderItem(item=item, line_total=item_cost(item)) for item in cart.items]

        order = Order(
            order_id=f"ORD-{uuid.uuid4().hex[:8].upper()}",
            status=OrderStatus.COMPLETED,
            items=lines,
            total_items=cart.total_items(),
            total=cart.total_cost(),
            contact=contact,
            payment_last_four=payment_last_four,
            user_id=user_id,
            created_at=datetime.now(timezone.utc),
        )
        self.orders[order.order_id] = order
        logger.debug(f"Stored order {order.order_id} ({len(lines)} lines)")
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        return self.orders.get(order_id)

    def list_orders(self, limit: int = 50, user_id: Optional[str] = None) -> list[Order]:
        """Newest orders first, optionally only those placed by one user"""
        found = [
            order for order in self.orders.values()
            if user_id is None or order.user_id == user_id
        ]
        found.sort(key=lambda order: order.created_at, reverse=True)
        return found[:limit]


# Singleton instance
order_db = OrderDatabase()
