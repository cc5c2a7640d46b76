# profitscope/schemas/products.py
# -----------------------------------------------------------------------------
# 상품별 한계이익 / 판매수량 시뮬레이션 스키마
# -----------------------------------------------------------------------------
from typing import List, Literal

from pydantic import BaseModel, Field

from profitscope.schemas.metrics import Amount, BreakEvenStatus, MetricsResult

SimulationField = Literal["price", "variable_cost", "quantity"]


class ProductIn(BaseModel):
    name: str = ""
    price: Amount = 0.0
    variable_cost: Amount = 0.0


class ProductPatch(BaseModel):
    name: str | None = None
    price: Amount | None = None
    variable_cost: Amount | None = None


class ProductRow(ProductIn):
    id: str


class ProductMargin(BaseModel):
    marginal_profit: float
    marginal_profit_rate: float


class ProductMarginRow(BaseModel):
    name: str
    price: float
    variable_cost: float
    margin: ProductMargin


class ProductMarginsRequest(BaseModel):
    products: List[ProductIn]


class SimulationRow(BaseModel):
    product_id: str
    price: float
    variable_cost: float
    quantity: float = 0.0
    sales_amount: float = 0.0
    variable_cost_amount: float = 0.0


class SimulationRowIn(BaseModel):
    price: Amount = 0.0
    variable_cost: Amount = 0.0
    quantity: Amount = 0.0


class SimulationRequest(BaseModel):
    rows: List[SimulationRowIn]
    fixed_cost: Amount = 0.0


class SimulationUpdate(BaseModel):
    field: SimulationField
    value: Amount


class SimulationSummary(BaseModel):
    total_sales: float
    total_variable_cost: float
    fixed_cost: float
    metrics: MetricsResult
    break_even_status: BreakEvenStatus


class RateComparison(BaseModel):
    product_id: str
    simulated_rate: float
    original_rate: float
    rate_difference: float


class ProductUpsert(ProductIn):
    id: str | None = None  # 기존 상품이면 판매수량 유지


class ProductsReplace(BaseModel):
    products: List[ProductUpsert] = Field(default_factory=list)
