"""
deductions — Chapter VI-A / Section 24(b) / salary-exemption rules.

Re-exports the engine's public functions and the input/result models so
callers can write `from taxdesk.deductions import calculate_section_80c`.
"""
from taxdesk.deductions.engine import (
    calculate_hra_exemption,
    calculate_section_80c,
    calculate_section_80d,
    calculate_home_loan_interest,
    calculate_section_80tta,
    calculate_section_80e,
    calculate_nps_deduction,
    calculate_total_deductions,
)
from taxdesk.deductions.schemas import (
    DeductionClaim,
    DeductionSummary,
    HRAInput,
    Section80CInput,
    Section80CResult,
    Section80DInput,
    Section80DResult,
)

__all__ = [
    "calculate_hra_exemption",
    "calculate_section_80c",
    "calculate_section_80d",
    "calculate_home_loan_interest",
    "calculate_section_80tta",
    "calculate_section_80e",
    "calculate_nps_deduction",
    "calculate_total_deductions",
    "DeductionClaim",
    "DeductionSummary",
    "HRAInput",
    "Section80CInput",
    "Section80CResult",
    "Section80DInput",
    "Section80DResult",
]
