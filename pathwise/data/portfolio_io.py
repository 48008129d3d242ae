"""Portfolio export/import (JSON wire format) and id-keyed merging.

Validation happens here, before anything reaches the engine: malformed
records raise PortfolioImportError with a message naming the record and
the offending field.
"""

import json
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol, TypeVar

from pydantic import ValidationError

from pathwise.models.investment import Investment
from pathwise.models.loan import Loan
from pathwise.models.records import InvestmentRecord, LoanRecord, PortfolioExport

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.0"
DATE_FIELDS = {"StartDate", "EndDate"}


class PortfolioImportError(ValueError):
    """Raised when imported portfolio data is malformed."""


@dataclass(frozen=True)
class MergeResult:
    added: int = 0
    updated: int = 0


class _HasId(Protocol):
    id: str


T = TypeVar("T", bound=_HasId)


def generate_id() -> str:
    return str(uuid.uuid4())


def _is_blank(item_id: object) -> bool:
    return not isinstance(item_id, str) or item_id.strip() == ""


def export_to_json(
    loans: list[Loan],
    investments: list[Investment],
    export_date: datetime | None = None,
) -> str:
    """Serialize loans and investments to the portfolio JSON format."""
    payload = PortfolioExport(
        loans=[LoanRecord.from_entity(loan) for loan in loans],
        investments=[InvestmentRecord.from_entity(inv) for inv in investments],
        export_date=export_date or datetime.now(timezone.utc),
        version=EXPORT_VERSION,
    )
    return payload.model_dump_json(by_alias=True, indent=2)


def _describe_error(exc: ValidationError, kind: str, index: int) -> str:
    """Turn the first pydantic error into a user-facing message."""
    error = exc.errors()[0]
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else ""

    if error["type"] == "missing":
        return f"Missing required field '{field}' in {kind} at index {index}"
    if field in DATE_FIELDS:
        return f"Invalid date in {kind} at index {index}"
    if not field:
        reason = error["msg"].removeprefix("Value error, ")
        return f"Invalid {kind} at index {index}: {reason}"
    return f"Invalid value for field '{field}' in {kind} at index {index}: {error['msg']}"


def _parse_records(raw_items: list, record_cls, kind: str) -> list:
    records = []
    for index, raw in enumerate(raw_items):
        if not isinstance(raw, dict):
            raise PortfolioImportError(f"Invalid {kind} at index {index}: expected an object")
        if _is_blank(raw.get("Id")):
            raise PortfolioImportError(
                f"Invalid or missing ID in {kind} at index {index}. "
                "All items must have a non-empty ID."
            )
        try:
            records.append(record_cls.model_validate(raw))
        except ValidationError as e:
            raise PortfolioImportError(_describe_error(e, kind, index)) from e
    return records


def import_from_json(text: str) -> tuple[list[Loan], list[Investment]]:
    """Parse portfolio JSON into validated loans and investments.

    Raises:
        PortfolioImportError: on unparseable JSON or any invalid record
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise PortfolioImportError("Invalid JSON format: unable to parse file") from e

    if not isinstance(data, dict) or "loans" not in data or "investments" not in data:
        raise PortfolioImportError(
            'Invalid data format: expected an object with "loans" and "investments" arrays'
        )
    if not isinstance(data["loans"], list) or not isinstance(data["investments"], list):
        raise PortfolioImportError("Invalid data format: loans and investments must be arrays")

    loans = [r.to_entity() for r in _parse_records(data["loans"], LoanRecord, "loan")]
    investments = [
        r.to_entity() for r in _parse_records(data["investments"], InvestmentRecord, "investment")
    ]
    logger.debug("Imported %d loans and %d investments", len(loans), len(investments))
    return loans, investments


def merge_data(existing: list[T], imported: list[T]) -> tuple[list[T], MergeResult]:
    """Merge imported items into existing ones by id.

    A matching id overwrites the existing item in place; a new id is
    appended. Imported items with blank ids are skipped, and existing items
    with blank ids are kept untouched.
    """
    merged = list(existing)
    positions = {item.id: i for i, item in enumerate(merged) if not _is_blank(item.id)}
    added = 0
    updated = 0

    for item in imported:
        if _is_blank(item.id):
            logger.debug("Skipping imported item with blank id")
            continue
        if item.id in positions:
            merged[positions[item.id]] = item
            updated += 1
        else:
            positions[item.id] = len(merged)
            merged.append(item)
            added += 1

    return merged, MergeResult(added=added, updated=updated)
