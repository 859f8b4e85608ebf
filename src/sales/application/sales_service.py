# sales/application/sales_service.py

from typing import List

from authentication.domain.entities import SessionClaim
from sales.domain.entities import SalesRecord, SearchCriteria
from sales.domain.query_builder import build_sales_query
from sales.infrastructure.sales_repository import SalesRepository
from sales.visualization.excel_exporter import export_sales_to_excel


class SalesService:
    """Runs sales searches restricted to the access scope of the session."""

    def __init__(self, repo: SalesRepository):
        self.repo = repo

    def search(self, claim: SessionClaim, criteria: SearchCriteria) -> List[SalesRecord]:
        # Only the verified claim decides the scope, never the request
        query = build_sales_query(
            claim.access_scope,
            customer_code=criteria.customer_code,
            goods_code=criteria.goods_code,
        )
        return self.repo.search(query)

    def export(self, claim: SessionClaim, criteria: SearchCriteria) -> bytes:
        return export_sales_to_excel(self.search(claim, criteria))
