# sales/domain/query_builder.py
"""
Builds the access-scoped sales query.

The query joins the accounting transaction header and detail with the
customer and goods masters. Every literal (company, language, scope
prefix, search terms) travels as a psycopg2 named parameter; the text
only ever contains placeholders, so the builder can be checked without
a database.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from sales_inquiry.config import settings

BASE_QUERY = """
    SELECT
        h.voucherno    AS invoice_no,
        h.customercode AS customer_code,
        c.name         AS customer_name,
        d.goodscode    AS goods_code,
        g.name         AS goods_name,
        d.qty_minus - d.qty_plus AS sales_qty,
        d.taxableamount_sc       AS sales_amount
    FROM t_acctransactionh h
    JOIN t_acctransactiond d
      ON h.company = d.company
     AND h.internalno = d.internalno
     AND h.sliptype = d.sliptype
    LEFT JOIN m_correspondent c
      ON h.company = c.company
     AND c.lang = %(lang)s
     AND h.customercode = c.code
    LEFT JOIN m_goods g
      ON d.company = g.company
     AND g.lang = %(lang)s
     AND d.goodscode = g.code
    WHERE h.company = %(company)s"""

ORDER_BY = "\n    ORDER BY h.voucherno, d.goodscode"

LIKE_ESCAPE = "\\"


@dataclass
class SalesQuery:
    text: str
    params: Dict[str, str] = field(default_factory=dict)


def escape_like(value: str) -> str:
    """Escapes LIKE metacharacters so the value matches literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def build_sales_query(
    access_scope: str,
    customer_code: Optional[str] = None,
    goods_code: Optional[str] = None,
    company: Optional[str] = None,
    lang: Optional[str] = None,
) -> SalesQuery:
    params: Dict[str, str] = {
        "company": company or settings.COMPANY_CODE,
        "lang": lang or settings.MASTER_LANG,
    }
    conditions = []

    # Row-level access control on the in-charge code of the voucher
    if access_scope != settings.ALL_ACCESS_SCOPE:
        if access_scope:
            conditions.append("h.inchargecode LIKE %(scope_pattern)s ESCAPE '\\'")
            params["scope_pattern"] = f"{escape_like(access_scope)}%"
        else:
            # No scope assigned: nothing is visible
            conditions.append("FALSE")

    if customer_code:
        conditions.append("h.customercode LIKE %(customer_pattern)s ESCAPE '\\'")
        params["customer_pattern"] = f"%{escape_like(customer_code)}%"

    if goods_code:
        conditions.append("d.goodscode LIKE %(goods_pattern)s ESCAPE '\\'")
        params["goods_pattern"] = f"%{escape_like(goods_code)}%"

    text = BASE_QUERY
    for condition in conditions:
        text += f"\n      AND {condition}"
    text += ORDER_BY

    return SalesQuery(text=text, params=params)
