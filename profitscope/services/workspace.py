# profitscope/services/workspace.py
# -----------------------------------------------------------------------------
# 공유 작업 상태 (단일 사용자, 인메모리)
# - 계산 입력/결과 하나를 모든 화면이 공유, 입력 변경 시 전체 재계산
# - 이익 계획 입력도 같은 상태에 보관
# - 상품 목록 + 판매수량 시뮬레이션 (상품 id로 연결, 목록 순서 = 입력 순서)
# -----------------------------------------------------------------------------
from __future__ import annotations

import uuid
from typing import Dict, Iterable, List

from profitscope.core.errors import NotFoundError, ValidationError
from profitscope.schemas.metrics import MetricsInput, MetricsResult
from profitscope.schemas.plan import ProfitPlanInput, ProfitPlanResult
from profitscope.schemas.products import (
    ProductRow,
    ProductUpsert,
    RateComparison,
    SimulationField,
    SimulationRow,
    SimulationSummary,
)
from profitscope.schemas.scenario import ScenarioRecord
from profitscope.schemas.workspace import WorkspaceSnapshot
from profitscope.services.metrics import (
    aggregate_simulation,
    break_even_status,
    compare_rates,
    compute_metrics,
    make_simulation_row,
)
from profitscope.services.plan import compute_profit_plan


def _new_product_id() -> str:
    return uuid.uuid4().hex


class Workspace:
    def __init__(self):
        self.input = MetricsInput()
        self.result: MetricsResult = compute_metrics(self.input)
        self.plan = ProfitPlanInput()
        self.plan_result: ProfitPlanResult = compute_profit_plan(self.plan)
        self.products: List[ProductRow] = []
        self.simulations: Dict[str, SimulationRow] = {}
        self.add_product()

    # ── 계산 입력 ────────────────────────────────────────────────────────────
    def update_inputs(self, **fields) -> MetricsResult:
        changes = {k: v for k, v in fields.items() if v is not None}
        self.input = self.input.model_copy(update=changes)
        self.result = compute_metrics(self.input)
        return self.result

    def restore(self, record: ScenarioRecord) -> MetricsResult:
        """저장된 시나리오의 입력값을 그대로 불러옴"""
        return self.update_inputs(
            sales=record.sales,
            variable_cost=record.variable_cost,
            fixed_cost=record.fixed_cost,
            investment=record.investment or 0.0,
        )

    # ── 이익 계획 ────────────────────────────────────────────────────────────
    def update_plan(self, **fields) -> ProfitPlanResult:
        changes = {k: v for k, v in fields.items() if v is not None}
        self.plan = self.plan.model_copy(update=changes)
        self.plan_result = compute_profit_plan(self.plan)
        return self.plan_result

    # ── 상품 ────────────────────────────────────────────────────────────────
    def _index_of(self, product_id: str) -> int:
        for i, p in enumerate(self.products):
            if p.id == product_id:
                return i
        raise NotFoundError(f"상품을 찾을 수 없습니다: {product_id}")

    def get_product(self, product_id: str) -> ProductRow:
        return self.products[self._index_of(product_id)]

    def add_product(
        self, name: str = "", price: float = 0.0, variable_cost: float = 0.0
    ) -> ProductRow:
        product = ProductRow(
            id=_new_product_id(), name=name, price=price, variable_cost=variable_cost
        )
        self.products.append(product)
        self.simulations[product.id] = make_simulation_row(
            product.id, price, variable_cost
        )
        return product

    def update_product(self, product_id: str, **fields) -> ProductRow:
        idx = self._index_of(product_id)
        changes = {k: v for k, v in fields.items() if v is not None}
        product = self.products[idx].model_copy(update=changes)
        self.products[idx] = product

        # 단가/변동비는 시뮬레이션에 반영, 판매수량은 유지
        quantity = self.simulations[product_id].quantity
        self.simulations[product_id] = make_simulation_row(
            product_id, product.price, product.variable_cost, quantity
        )
        return product

    def remove_product(self, product_id: str) -> None:
        idx = self._index_of(product_id)
        del self.products[idx]
        del self.simulations[product_id]
        if not self.products:
            self.add_product()

    def set_products(self, rows: Iterable[ProductUpsert]) -> List[ProductRow]:
        rows = list(rows)
        ids = [r.id for r in rows if r.id]
        if len(ids) != len(set(ids)):
            raise ValidationError("상품 id가 중복되었습니다")

        old_quantities = {pid: s.quantity for pid, s in self.simulations.items()}
        self.products = []
        self.simulations = {}
        for r in rows:
            product = ProductRow(
                id=r.id or _new_product_id(),
                name=r.name,
                price=r.price,
                variable_cost=r.variable_cost,
            )
            self.products.append(product)
            self.simulations[product.id] = make_simulation_row(
                product.id,
                product.price,
                product.variable_cost,
                old_quantities.get(product.id, 0.0),
            )
        if not self.products:
            self.add_product()
        return self.products

    # ── 시뮬레이션 ──────────────────────────────────────────────────────────
    def update_simulation(
        self, product_id: str, field: SimulationField, value: float
    ) -> SimulationRow:
        self._index_of(product_id)
        current = self.simulations[product_id]
        values = {
            "price": current.price,
            "variable_cost": current.variable_cost,
            "quantity": current.quantity,
            field: value,
        }
        sim = make_simulation_row(product_id, **values)
        self.simulations[product_id] = sim
        return sim

    def simulation_rows(self) -> List[SimulationRow]:
        return [self.simulations[p.id] for p in self.products]

    def simulation_summary(self) -> SimulationSummary:
        return aggregate_simulation(self.simulation_rows(), self.input.fixed_cost)

    def rate_comparisons(self) -> List[RateComparison]:
        return [
            compare_rates(self.simulations[p.id], p.price, p.variable_cost)
            for p in self.products
        ]

    def snapshot(self) -> WorkspaceSnapshot:
        return WorkspaceSnapshot(
            input=self.input,
            result=self.result,
            break_even_status=break_even_status(self.result.break_even_point_ratio),
            plan=self.plan,
            plan_result=self.plan_result,
            products=list(self.products),
            simulations=self.simulation_rows(),
            comparisons=self.rate_comparisons(),
        )


_workspace = Workspace()


def get_workspace() -> Workspace:
    return _workspace
