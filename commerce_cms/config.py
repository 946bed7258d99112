import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./commerce_cms.db")
ENV = os.getenv("ENV", "production")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Comma-separated list; "*" keeps the public API (checkout included) open to any storefront
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# The identity provider in front of the API forwards the signed-in user id in this header
AUTH_USER_HEADER = os.getenv("AUTH_USER_HEADER", "X-User-Id")

# Payment processor
STRIPE_API_SECRET_KEY = os.getenv("STRIPE_API_SECRET_KEY", "")
STRIPE_WEBHOOK_SECRET = os.getenv("STRIPE_WEBHOOK_SECRET", "")
STOREFRONT_URL = os.getenv("STOREFRONT_URL", "http://localhost:3001")
CURRENCY = os.getenv("CURRENCY", "usd")
