# profitscope/routers/products.py
# -----------------------------------------------------------------------------
# /products/margins   : 상품별 한계이익/이익률
# /simulate/aggregate : 판매수량 시뮬레이션 합계 (상태 없음)
# -----------------------------------------------------------------------------
from typing import List

from fastapi import APIRouter

from profitscope.schemas.products import (
    ProductMarginRow,
    ProductMarginsRequest,
    SimulationRequest,
    SimulationSummary,
)
from profitscope.services.metrics import aggregate_simulation, compute_product_margin

router = APIRouter(tags=["products"])


@router.post("/products/margins", response_model=List[ProductMarginRow])
async def product_margins(req: ProductMarginsRequest):
    return [
        ProductMarginRow(
            name=p.name,
            price=p.price,
            variable_cost=p.variable_cost,
            margin=compute_product_margin(p.price, p.variable_cost),
        )
        for p in req.products
    ]


@router.post("/simulate/aggregate", response_model=SimulationSummary)
async def simulate_aggregate(req: SimulationRequest):
    return aggregate_simulation(req.rows, req.fixed_cost)
