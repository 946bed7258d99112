import logging
import stripe
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from commerce_cms.database import get_db
from commerce_cms.db.crud import order as order_crud
from commerce_cms.errors import BadRequest, InternalError
from commerce_cms import payments

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/webhook",
    tags=["webhook"]
)

@router.post("")
async def payment_webhook(request: Request, db: Session = Depends(get_db)):
    """
    Payment processor callback. A completed checkout marks its order paid and
    stores the customer's contact details; other event types are ignored.
    """
    payload = await request.body()
    signature = request.headers.get("stripe-signature")
    try:
        event = payments.verify_webhook_event(payload, signature)
    except stripe.SignatureVerificationError as e:
        logger.warning(f"Webhook signature verification failed: {e}")
        raise BadRequest("Invalid signature")
    except ValueError as e:
        logger.warning(f"Webhook payload could not be decoded: {e}")
        raise BadRequest("Invalid payload")

    event_type = event.get("type")
    if event_type != payments.CHECKOUT_COMPLETED:
        logger.debug(f"Ignoring webhook event {event_type}")
        return {"received": True}

    session = (event.get("data") or {}).get("object") or {}
    order_id = (session.get("metadata") or {}).get("orderId")
    order = order_crud.get_order(db, order_id) if order_id else None
    if not order:
        raise InternalError(f"Order {order_id} not found")

    # Replays of the same completion must not overwrite a paid order
    if order.is_paid:
        logger.info(f"Order {order.id} already paid, ignoring replay")
        return {"received": True}

    order_crud.mark_order_paid(db, order, **payments.customer_fields(session))
    logger.info(f"Order {order.id} paid")
    return {"received": True}
