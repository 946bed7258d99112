# init_db.py
import logging
import os
from decimal import Decimal
from commerce_cms.database import engine, SessionLocal, Base
from commerce_cms.db.models import Store, Billboard, Category, Size, Color, Product, Image

logger = logging.getLogger(__name__)

DEMO_USER_ID = os.getenv("DEMO_USER_ID", "demo-user")

def seed():
    """Create a demo store with one product so the storefront has something to show"""
    db = SessionLocal()
    try:
        if db.query(Store).first():
            return

        store = Store(name="Demo Store", user_id=DEMO_USER_ID)
        billboard = Billboard(store=store, label="Welcome", image_public_id="demo/billboard")
        category = Category(store=store, billboard=billboard, name="Shoes")
        size = Size(store=store, name="Medium", value="M")
        color = Color(store=store, name="Black", value="#000000")
        Product(
            store=store,
            category=category,
            size=size,
            color=color,
            name="Runner",
            price=Decimal("49.99"),
            is_featured=True,
            images=[Image(image_public_id="demo/runner")],
        )
        db.add(store)
        db.commit()
        logger.info(f"Seeded demo store {store.id} for user {DEMO_USER_ID}")
    finally:
        db.close()

def init():
    Base.metadata.create_all(bind=engine)
    print("✅ Tables created")
    seed()
    print("✅ Seed data added")

if __name__ == "__main__":
    init()
