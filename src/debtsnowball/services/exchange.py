"""Versioned debt document and CSV schedule helpers.

Everything here works on strings and dictionaries; reading and writing files
is left to the caller.
"""

from __future__ import annotations

import csv
import io
import json
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Iterable, Mapping, Sequence

from pydantic import ValidationError

from ..exceptions import DocumentError
from ..logging_config import get_logger
from ..models.debt import Debt
from ..money import round_currency
from ..models.plan import PaymentMonth

logger = get_logger("services.exchange")

DOCUMENT_VERSION = "1.0.0"

# Document key -> Debt field
_DEBT_KEYS = {
    "id": "id",
    "name": "name",
    "balance": "balance",
    "interestRate": "interest_rate",
    "minimumPayment": "minimum_payment",
    "startDate": "start_date",
}

SCHEDULE_HEADERS = [
    "month",
    "date",
    "debt",
    "starting_balance",
    "payment",
    "interest",
    "principal",
    "ending_balance",
    "completed",
]


@dataclass(frozen=True, slots=True)
class ImportedData:
    debts: list[Debt]
    monthly_budget: float | None


def debt_to_document(debt: Debt) -> dict[str, Any]:
    """Serialize a debt using the document's camelCase keys."""

    record = {key: getattr(debt, field) for key, field in _DEBT_KEYS.items()}
    record["startDate"] = debt.start_date.isoformat()
    return record


def debt_from_document(record: Mapping[str, Any]) -> Debt:
    """Build a validated debt from a document record."""

    missing = [key for key in _DEBT_KEYS if record.get(key) in (None, "")]
    if missing:
        raise DocumentError(f"missing fields: {', '.join(missing)}")
    for key in ("balance", "interestRate", "minimumPayment"):
        if isinstance(record[key], bool) or not isinstance(record[key], (int, float)):
            raise DocumentError(f"{key} must be a number")
    try:
        return Debt.model_validate({field: record[key] for key, field in _DEBT_KEYS.items()})
    except ValidationError as exc:
        raise DocumentError(str(exc)) from exc


def build_document(
    debts: Sequence[Debt], monthly_budget: float, *, exported_at: datetime | None = None
) -> dict[str, Any]:
    """Return the export document for ``debts`` and ``monthly_budget``."""

    exported_at = exported_at or datetime.now(timezone.utc)
    return {
        "version": DOCUMENT_VERSION,
        "exportDate": exported_at.isoformat(),
        "debts": [debt_to_document(debt) for debt in debts],
        "monthlyBudget": monthly_budget,
        "metadata": {
            "totalDebts": len(debts),
            "totalAmount": round_currency(sum(d.balance for d in debts)),
            "totalMinimumPayments": round_currency(sum(d.minimum_payment for d in debts)),
        },
    }


def dumps_document(
    debts: Sequence[Debt], monthly_budget: float, *, exported_at: datetime | None = None
) -> str:
    return json.dumps(build_document(debts, monthly_budget, exported_at=exported_at), indent=2)


def parse_document(payload: str | Mapping[str, Any]) -> ImportedData:
    """Validate an exported document and return its debts and budget.

    Raises:
        DocumentError: the payload is not JSON, lacks a ``debts`` list, or a
            debt record fails validation (the 1-based index is reported).
    """

    if isinstance(payload, str):
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise DocumentError(f"Invalid JSON document: {exc.msg}") from exc
    else:
        data = payload

    if not isinstance(data, Mapping) or "version" not in data:
        raise DocumentError("Invalid document structure: missing version")
    raw_debts = data.get("debts")
    if not isinstance(raw_debts, list):
        raise DocumentError("Invalid document structure: no debts found")

    debts: list[Debt] = []
    for index, record in enumerate(raw_debts, start=1):
        if not isinstance(record, Mapping):
            raise DocumentError(f"Debt {index} has invalid data: not an object")
        try:
            debts.append(debt_from_document(record))
        except DocumentError as exc:
            raise DocumentError(f"Debt {index} has invalid data: {exc}") from exc

    budget = data.get("monthlyBudget")
    monthly_budget = None
    if isinstance(budget, (int, float)) and not isinstance(budget, bool) and budget > 0:
        monthly_budget = float(budget)

    logger.info(
        "Imported debt document",
        extra={"version": data["version"], "debt_count": len(debts)},
    )
    return ImportedData(debts=debts, monthly_budget=monthly_budget)


def _serialize_value(value: Any) -> str:
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, float):
        return f"{value:.2f}"
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def schedule_to_csv(plan: Iterable[PaymentMonth]) -> str:
    """Render every ledger row of ``plan`` as CSV text."""

    buffer = io.StringIO(newline="")
    writer = csv.DictWriter(buffer, fieldnames=SCHEDULE_HEADERS, quoting=csv.QUOTE_MINIMAL)
    writer.writeheader()
    for month in plan:
        for row in month.debts:
            writer.writerow(
                {
                    "month": _serialize_value(month.month),
                    "date": _serialize_value(month.date),
                    "debt": _serialize_value(row.name),
                    "starting_balance": _serialize_value(row.starting_balance),
                    "payment": _serialize_value(row.payment),
                    "interest": _serialize_value(row.interest_paid),
                    "principal": _serialize_value(row.principal_paid),
                    "ending_balance": _serialize_value(row.ending_balance),
                    "completed": _serialize_value(row.is_completed),
                }
            )
    return buffer.getvalue()
