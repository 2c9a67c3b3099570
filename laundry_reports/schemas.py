"""Typed wire DTOs for :class:`~laundry_reports.models.ParseResult`.

Dashboards and exporters consume the camelCase JSON shape below. Field values
are authoritative: ``amount`` is a number, ``cycleType`` an enumerated tag and
``timestamp`` a naive ISO-8601 local date-time (no offset).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .models import Advisory, CycleType, ParseResult, ReportType, Transaction

_DTO_CONFIG = ConfigDict(strict=True, extra="forbid", populate_by_name=True, frozen=True)


class MetadataOut(BaseModel):
    model_config = _DTO_CONFIG

    unit_name: str = Field(alias="unitName")
    period: str
    report_type: ReportType = Field(alias="reportType")


class TransactionOut(BaseModel):
    model_config = _DTO_CONFIG

    id: str
    timestamp: datetime
    raw_date: str = Field(alias="rawDate")
    raw_time: str = Field(alias="rawTime")
    product_label: str = Field(alias="productLabel")
    cycle_type: CycleType = Field(alias="cycleType")
    amount: float
    payment_method: str = Field(alias="paymentMethod")
    machine: str
    day_of_week: int = Field(alias="dayOfWeek", ge=0, le=6)

    @classmethod
    def from_transaction(cls, tx: Transaction) -> TransactionOut:
        return cls(
            id=tx.id,
            timestamp=tx.timestamp,
            raw_date=tx.raw_date,
            raw_time=tx.raw_time,
            product_label=tx.product_label,
            cycle_type=tx.cycle_type,
            amount=tx.amount,
            payment_method=tx.payment_method,
            machine=tx.machine,
            day_of_week=tx.day_of_week,
        )


class AdvisoryOut(BaseModel):
    model_config = _DTO_CONFIG

    code: str
    message: str
    line: int | None = None

    @classmethod
    def from_advisory(cls, adv: Advisory) -> AdvisoryOut:
        return cls(code=adv.code, message=adv.message, line=adv.line)


class ParseResultOut(BaseModel):
    model_config = _DTO_CONFIG

    metadata: MetadataOut
    transactions: list[TransactionOut]
    advisories: list[AdvisoryOut] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ParseResult) -> ParseResultOut:
        md = result.metadata
        return cls(
            metadata=MetadataOut(
                unit_name=md.unit_name, period=md.period, report_type=md.report_type
            ),
            transactions=[TransactionOut.from_transaction(t) for t in result.transactions],
            advisories=[AdvisoryOut.from_advisory(a) for a in result.advisories],
        )


__all__ = ["AdvisoryOut", "MetadataOut", "ParseResultOut", "TransactionOut"]
