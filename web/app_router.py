from fastapi import APIRouter

from web.responses import envelope

API_VERSION = "1.0.0"

ENDPOINTS = {
    "products": {
        "GET /products/favorites": "Get 3 random coffee products for main page",
        "GET /products": "Get all products (without sizes and additives)",
        "GET /products/:id": "Get full product details by ID",
    },
    "auth": {
        "POST /auth/register": "Register new user",
        "POST /auth/login": "User login",
        "GET /auth/profile": "Get current user profile (protected)",
    },
    "orders": {
        "POST /orders/confirm": "Confirm order (anonymous or authenticated)",
        "POST /orders/confirm-auth": "Confirm order (authenticated only)",
    },
}

app_router = APIRouter(tags=["app"])


@app_router.get("/")
async def get_api_info():
    return envelope(
        data={"version": API_VERSION, "endpoints": ENDPOINTS},
        message="Coffee House API is running!",
    )


@app_router.get("/health")
async def health_check():
    """Liveness check for load balancers and uptime monitors."""
    return {"status": "healthy"}
