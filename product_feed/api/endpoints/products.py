from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from product_feed.api.dependencies import get_card_generator, get_product_source, get_product_state
from product_feed.catalogue.product_cards import ProductCardGenerator, render_product_list
from product_feed.catalogue.state_manager import LoadStatus, ProductListState
from product_feed.integrations.contracts.interfaces import ProductSource

api = APIRouter()
products_api = api


@api.get("", tags=["Products"])
async def list_products(
    state: ProductListState = Depends(get_product_state),
    source: ProductSource = Depends(get_product_source),
    generator: ProductCardGenerator = Depends(get_card_generator),
):
    if state.status == LoadStatus.IDLE:
        await state.load(source)
    return render_product_list(state, generator).to_dict()


@api.post("/refresh", tags=["Products"])
async def refresh_products(
    state: ProductListState = Depends(get_product_state),
    source: ProductSource = Depends(get_product_source),
    generator: ProductCardGenerator = Depends(get_card_generator),
):
    await state.load(source)
    return render_product_list(state, generator).to_dict()


@api.get("/{product_id}", tags=["Products"])
async def get_product(
    product_id: str,
    state: ProductListState = Depends(get_product_state),
    source: ProductSource = Depends(get_product_source),
    generator: ProductCardGenerator = Depends(get_card_generator),
):
    if state.status == LoadStatus.IDLE:
        await state.load(source)
    if state.status == LoadStatus.ERROR:
        raise HTTPException(status_code=404, detail=state.error_message)

    # While another load is in flight this reads the last completed product list.
    product = state.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=f"Product '{product_id}' not found.")
    return asdict(generator.generate_card(product))
