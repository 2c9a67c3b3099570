"""Report ingestion: layout table, detection, structural scans and row mapping."""

from .detect import detect_format, detect_spec
from .formats import ATTENDANT_SPEC, FORMAT_SPECS, SELF_SERVICE_SPEC, FormatSpec
from .rows import RawRow, clean_field, is_blank_line, map_row, split_csv_line
from .scan import extract_operator_name, extract_period, locate_header

__all__ = [
    "ATTENDANT_SPEC",
    "FORMAT_SPECS",
    "SELF_SERVICE_SPEC",
    "FormatSpec",
    "RawRow",
    "clean_field",
    "detect_format",
    "detect_spec",
    "extract_operator_name",
    "extract_period",
    "is_blank_line",
    "locate_header",
    "map_row",
    "split_csv_line",
]
