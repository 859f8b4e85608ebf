# sales/api/routes.py

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from authentication.domain.entities import SessionClaim
from authentication.utils.dependencies import get_current_claim, get_db_connection
from sales.application.sales_service import SalesService
from sales.domain.entities import SearchCriteria
from sales.infrastructure.sales_repository import SalesRepository
from sales.visualization.excel_exporter import XLSX_MEDIA_TYPE, export_filename
from utils.logging_factory import get_logger

router = APIRouter(tags=["Sales"])
logger = get_logger("sales")


def get_sales_repository(conn=Depends(get_db_connection)) -> SalesRepository:
    return SalesRepository(conn)


def get_sales_service(repo: SalesRepository = Depends(get_sales_repository)) -> SalesService:
    return SalesService(repo)


def get_search_criteria(
    customerCode: str | None = Query(None, description="Substring of the customer code"),
    goodsCode: str | None = Query(None, description="Substring of the goods code"),
) -> SearchCriteria:
    return SearchCriteria.from_query(customerCode, goodsCode)


@router.get("", summary="Search sales visible to the logged-in employee")
def search_sales(
    claim: SessionClaim = Depends(get_current_claim),
    criteria: SearchCriteria = Depends(get_search_criteria),
    service: SalesService = Depends(get_sales_service),
):
    rows = service.search(claim, criteria)
    return [row.to_dict() for row in rows]


@router.get("/export", summary="Export the sales search as an Excel workbook")
def export_sales(
    claim: SessionClaim = Depends(get_current_claim),
    criteria: SearchCriteria = Depends(get_search_criteria),
    service: SalesService = Depends(get_sales_service),
):
    content = service.export(claim, criteria)
    filename = export_filename()
    logger.info(f"📦 Export {filename} generated for employee {claim.code}.")
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
