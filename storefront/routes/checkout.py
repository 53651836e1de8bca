"""Checkout API routes for the storefront"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from cart_engine import format_money
from identity import VerificationResult

from ..models.checkout import CheckoutRequest, CheckoutResponse, Order
from ..database.carts import cart_db
from ..database.orders import order_db
from ..security.session_middleware import optional_session, require_login, require_staff

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


@router.post("", response_model=CheckoutResponse)
async def checkout(
    request: CheckoutRequest,
    session: VerificationResult = Depends(optional_session),
):
    """
    Place a simulated order.

    No payment is taken: the card is only checked for shape and its
    last four digits are kept on the order. The cart is cleared on success.
    """
    store = cart_db.get_cart(request.cart_id)
    if not store:
        raise HTTPException(status_code=404, detail="Cart not found")

    if not store.items:
        raise HTTPException(status_code=400, detail="Cart is empty")

    card_digits = "".join(ch for ch in request.payment.card_number if ch.isdigit())
    if len(card_digits) < 12:
        raise HTTPException(status_code=400, detail="Invalid card number")

    order = order_db.create_order(
        cart=store,
        contact=request.contact,
        payment_last_four=card_digits[-4:],
        user_id=session.claims.user_id if session.claims else None,
    )

    store.clear()

    logger.info(
        f"Order {order.order_id} created: {format_money(order.total)} - "
        f"{order.total_items} items for {order.contact.email}"
    )

    return CheckoutResponse(
        success=True,
        order=order,
        message="Order placed successfully! (This is a demo)",
    )


@router.get("/my-orders", response_model=list[Order])
async def list_my_orders(session: VerificationResult = Depends(require_login)):
    """Orders placed while logged in as the current user"""
    return order_db.list_orders(user_id=session.claims.user_id)


@router.get("/orders/{order_id}", response_model=Order)
async def get_order(order_id: str):
    """Get order details"""
    order = order_db.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.get("/orders", response_model=list[Order])
async def list_orders(
    limit: int = 50,
    session: VerificationResult = Depends(require_staff),
):
    """List recent orders (staff only)"""
    return order_db.list_orders(limit=limit)
