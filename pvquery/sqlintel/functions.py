"""Function vocabulary surfaced by completion and highlighting."""

from __future__ import annotations

from typing import Tuple

from .catalog import KeywordCatalog


class FunctionCatalog(KeywordCatalog):
    """Scalar, aggregate and window functions understood by the query engine."""

    @classmethod
    def default(cls) -> "FunctionCatalog":
        return cls(_DEFAULT_FUNCTIONS)


_DEFAULT_FUNCTIONS: Tuple[str, ...] = (
    "ABS", "ARRAY_AGG", "AVG",
    "CEIL", "COALESCE", "CONCAT", "COUNT",
    "DATE", "DATE_TRUNC", "DENSE_RANK",
    "FIRST_VALUE", "FLOOR",
    "IIF", "IFNULL",
    "JSON_EXTRACT", "JSON_VALUE",
    "LAG", "LAST_VALUE", "LEAD", "LENGTH", "LOWER",
    "MAX", "MIN",
    "NOW", "NTH_VALUE", "NTILE", "NULLIF",
    "RANK", "REPLACE", "ROUND", "ROW_NUMBER",
    "STRING_AGG", "SUBSTRING", "SUM",
    "TIME", "TIMESTAMP", "TO_CHAR", "TO_DATE", "TO_TIMESTAMP", "TRIM",
    "UPPER",
)

FUNCTIONS = FunctionCatalog.default()


__all__ = ["FUNCTIONS", "FunctionCatalog"]
