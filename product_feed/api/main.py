"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI

from product_feed.api.endpoints.products import products_api

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Product Feed API",
    description="Fetches the product feed and serves the rendered product list",
    version="1.0.0",
)

app.include_router(products_api, prefix="/api/v1/products", tags=["Products"])


@app.get("/health")
async def health():
    return {"status": "ok"}
