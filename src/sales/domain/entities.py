# sales/domain/entities.py

from dataclasses import dataclass, asdict
from decimal import Decimal
from typing import Optional, Union

Number = Union[int, float, Decimal]


@dataclass(frozen=True)
class SearchCriteria:
    customer_code: Optional[str] = None
    goods_code: Optional[str] = None

    @classmethod
    def from_query(cls, customer_code: Optional[str], goods_code: Optional[str]) -> "SearchCriteria":
        # Blank filters are treated as not provided
        return cls(
            customer_code=(customer_code or "").strip() or None,
            goods_code=(goods_code or "").strip() or None,
        )


@dataclass(frozen=True)
class SalesRecord:
    invoice_no: str
    customer_code: str
    customer_name: Optional[str]
    goods_code: str
    goods_name: Optional[str]
    sales_qty: Optional[Number]
    sales_amount: Optional[Number]

    def to_dict(self) -> dict:
        return asdict(self)
