"""API router aggregator.

All resource routers are included here and mounted under /api by main.py.
"""

from fastapi import APIRouter

from customer_api.api import customers

router = APIRouter()

router.include_router(customers.router, prefix="/customer", tags=["customer"])
