import logging
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from commerce_cms.config import STOREFRONT_URL
from commerce_cms.database import get_db
from commerce_cms.db.crud import order as order_crud
from commerce_cms.db.models.store import Store
from commerce_cms.db.schemas.order import CheckoutRequest, CheckoutResponse
from commerce_cms.dependencies import get_public_store
from commerce_cms.errors import BadRequest
from commerce_cms import payments

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/{store_id}/checkout",
    tags=["checkout"]
)

# The storefront lives on another origin
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

@router.options("")
def checkout_preflight():
    return JSONResponse(content={}, headers=CORS_HEADERS)

@router.post("", response_model=CheckoutResponse, status_code=status.HTTP_201_CREATED)
def checkout(
    checkout_request: CheckoutRequest,
    request: Request,
    store: Store = Depends(get_public_store),
    db: Session = Depends(get_db)
):
    """
    Create a pending order for the cart and hand the shopper over to the
    hosted payment page.

    Every product id is looked up on its own and repeated ids are billed
    again. Ids that do not resolve to a product of this store are skipped.
    The order is committed before the payment session is requested, so a
    failure there leaves an unpaid order behind.
    """
    products = order_crud.lookup_products(db, store.id, checkout_request.product_ids)
    if not products:
        raise BadRequest("None of the requested products exist in this store")
    line_items = payments.build_line_items(products)
    order = order_crud.create_order(db, store.id, products)
    logger.info(f"Order {order.id} created in store {store.id} with {len(line_items)} item(s)")

    origin = request.headers.get("origin") or STOREFRONT_URL
    try:
        session = payments.create_checkout_session(line_items, order.id, origin)
    except Exception:
        logger.error(f"Checkout session failed, order {order.id} stays unpaid")
        raise

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={"url": session.url},
        headers=CORS_HEADERS,
    )
