"""
Hosted checkout and webhook verification against Stripe.

Only two calls leave the process: creating a Checkout Session for a pending
order, and verifying the signature of the callback that reports it paid.
"""
import json
import logging
from typing import Any, Dict, List, Optional

import stripe

from commerce_cms.config import CURRENCY, STRIPE_API_SECRET_KEY, STRIPE_WEBHOOK_SECRET
from commerce_cms.db.models.product import Product

logger = logging.getLogger(__name__)

stripe.api_key = STRIPE_API_SECRET_KEY

CHECKOUT_COMPLETED = "checkout.session.completed"
ADDRESS_FIELDS = ("line1", "line2", "city", "state", "postal_code", "country")

def build_line_items(products: List[Product]) -> List[Dict[str, Any]]:
    """One unit per product, priced at its current price in cents"""
    return [
        {
            "quantity": 1,
            "price_data": {
                "currency": CURRENCY,
                "product_data": {"name": product.name},
                "unit_amount": int(round(float(product.price) * 100)),
            },
        }
        for product in products
    ]

def create_checkout_session(line_items: List[Dict[str, Any]], order_id: str, origin: str):
    session = stripe.checkout.Session.create(
        line_items=line_items,
        mode="payment",
        billing_address_collection="required",
        phone_number_collection={"enabled": True},
        success_url=f"{origin}/cart?success=true",
        cancel_url=f"{origin}/cart?canceled=true",
        metadata={"orderId": order_id},
    )
    logger.info(f"Checkout session {session.id} created for order {order_id}")
    return session

def verify_webhook_event(payload: bytes, signature: Optional[str]) -> Dict[str, Any]:
    """
    Check the Stripe-Signature header against the shared secret and return the
    decoded event. Raises stripe.SignatureVerificationError or ValueError.
    """
    body = payload.decode("utf-8")
    stripe.WebhookSignature.verify_header(body, signature or "", STRIPE_WEBHOOK_SECRET)
    event = json.loads(body)
    if not isinstance(event, dict):
        raise ValueError("Webhook payload is not a JSON object")
    return event

def format_address(address: Optional[Dict[str, Any]]) -> str:
    if not address:
        return ""
    return ", ".join(str(address[key]) for key in ADDRESS_FIELDS if address.get(key))

def customer_fields(session: Dict[str, Any]) -> Dict[str, str]:
    """Contact fields for the order, taken from a completed checkout session"""
    details = session.get("customer_details") or {}
    return {
        "name": details.get("name") or "",
        "email": details.get("email") or "",
        "phone": details.get("phone") or "",
        "address": format_address(details.get("address")),
    }
