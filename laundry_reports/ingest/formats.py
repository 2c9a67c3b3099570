"""Declarative layout table for the supported point-of-sale CSV exports.

Each :class:`FormatSpec` names the header signature that identifies a layout,
the 0-based column of every field the row mapper extracts and the minimum
number of fields a data row must have. Supporting another export is a matter
of appending an entry to :data:`FORMAT_SPECS`.

Self-service terminals (header excerpt)::

    ..., Pagamento, ..., Produtos, ..., Total Venda, Data, Hora

Attendant terminals (header excerpt)::

    Cliente, ..., Nome Terminal, Pagamento, ..., Venda (R$), ..., Data, Hora
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from ..models import CsvFormat, ReportType

# Fields every layout must locate; ``unit`` is optional.
REQUIRED_FIELDS: frozenset[str] = frozenset({"machine", "payment", "amount", "date", "time"})


class FormatSpec(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    format: CsvFormat
    report_type: ReportType
    signature: tuple[str, ...]
    columns: dict[str, int]
    min_columns: int
    # Attendant exports repeat header-like rows mid-file; a "/" in the date
    # column separates real data rows from those.
    require_date_separator: bool = False
    unit_name_source: Literal["operator_line", "first_column"]

    @field_validator("signature")
    @classmethod
    def _signature_non_empty(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v or any(not s for s in v):
            raise ValueError("signature must contain non-empty substrings")
        return v

    @model_validator(mode="after")
    def _columns_within_minimum(self) -> FormatSpec:
        missing = sorted(REQUIRED_FIELDS - set(self.columns))
        if missing:
            raise ValueError("column map is missing fields: " + ", ".join(missing))
        if any(idx < 0 for idx in self.columns.values()):
            raise ValueError("column indexes must be non-negative")
        highest = max(self.columns.values())
        if self.min_columns <= highest:
            raise ValueError(
                f"min_columns={self.min_columns} does not cover column index {highest}"
            )
        if self.unit_name_source == "first_column" and "unit" not in self.columns:
            raise ValueError("unit_name_source='first_column' requires a 'unit' column")
        return self

    def matches(self, line: str) -> bool:
        """Return whether ``line`` contains every signature substring."""

        return all(marker in line for marker in self.signature)


SELF_SERVICE_SPEC = FormatSpec(
    format=CsvFormat.SELF_SERVICE,
    report_type=ReportType.SELF_SERVICE,
    signature=("Produtos", "Total Venda", "Data"),
    columns={"payment": 4, "machine": 6, "amount": 9, "date": 10, "time": 11},
    min_columns=12,
    unit_name_source="operator_line",
)

ATTENDANT_SPEC = FormatSpec(
    format=CsvFormat.ATTENDANT,
    report_type=ReportType.ATTENDANT,
    signature=("Nome Terminal", "Venda (R$)", "Data"),
    columns={"unit": 0, "machine": 4, "payment": 5, "amount": 8, "date": 12, "time": 13},
    min_columns=14,
    require_date_separator=True,
    unit_name_source="first_column",
)

# Detection order: earlier entries win when a line matches several signatures.
FORMAT_SPECS: tuple[FormatSpec, ...] = (SELF_SERVICE_SPEC, ATTENDANT_SPEC)


def spec_for(fmt: CsvFormat) -> FormatSpec | None:
    for spec in FORMAT_SPECS:
        if spec.format == fmt:
            return spec
    return None


__all__ = [
    "ATTENDANT_SPEC",
    "FORMAT_SPECS",
    "SELF_SERVICE_SPEC",
    "FormatSpec",
    "spec_for",
]
