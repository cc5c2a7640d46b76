# profitscope/services/numbers.py
# -----------------------------------------------------------------------------
# 숫자 입력 정규화 / 표시 포맷
# - 전각 숫자(０-９) → 반각
# - 앞부분 숫자만 읽음("12abc" → 12, "1_000" → 1), 실패·비유한수는 0
# - 엔화(JPY) 통화 표기, 백분율 표기
# -----------------------------------------------------------------------------
import math
import re
from decimal import ROUND_HALF_UP, Decimal

UNCALCULABLE = "計算不可"
YEN = "￥"

_FULL_WIDTH_DIGITS = str.maketrans("０１２３４５６７８９", "0123456789")
_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def to_half_width(text: str) -> str:
    return text.translate(_FULL_WIDTH_DIGITS)


def parse_amount(text: str | None) -> float:
    if text is None:
        return 0.0
    m = _LEADING_NUMBER.match(to_half_width(str(text)))
    if not m:
        return 0.0
    value = float(m.group())
    return value if math.isfinite(value) else 0.0


def format_currency(value: float) -> str:
    if not math.isfinite(value):
        return UNCALCULABLE
    # 0 자리 반올림(0.5는 0에서 먼 쪽)
    amount = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}{YEN}{abs(int(amount)):,}"


def format_percentage(value: float) -> str:
    return f"{value:.2f}%"
