"""
schemas.py — Deduction Engine Pydantic v2 data contracts.

Defines:
  - HRAInput, Section80CInput, Section80DInput   (raw per-provision inputs)
  - Section80CResult                              (capped total + raw echo)
  - Section80DBreakdown, Section80DLimits,
    Section80DResult                              (per-category capped amounts)
  - DeductionClaim, DeductionSummary              (all provisions in one pass)

All monetary fields are annual INR amounts. Every model is frozen: results are
built once per calculation and handed to the caller as-is.

BREAKDOWN ASYMMETRY (kept on purpose):
  - Section80CResult.breakdown echoes the RAW inputs; only the total is capped.
  - Section80DResult.breakdown holds POST-CAP amounts per category.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

_INPUT_CONFIG = ConfigDict(extra="forbid", frozen=True)


def _amount(description: str):
    return Field(default=0, ge=0, description=description)


# ---------------------------------------------------------------------------
# HRAInput — Section 10(13A) / Rule 2A inputs
# ---------------------------------------------------------------------------

class HRAInput(BaseModel):
    """
    Inputs for the HRA exemption.

    rent_paid is ANNUAL here (the practice UI collects the yearly figure).
    is_metro_city selects 50% vs 40% of basic salary.
    """
    model_config = _INPUT_CONFIG

    basic_salary: float = Field(..., ge=0, description="Annual basic salary.")
    hra_received: float = _amount("Annual HRA component received from employer.")
    rent_paid: float = _amount("Annual rent actually paid.")
    is_metro_city: bool = False


# ---------------------------------------------------------------------------
# Section80CInput — one field per 80C instrument
# ---------------------------------------------------------------------------

class Section80CInput(BaseModel):
    """Contributions eligible under Section 80C. Summed, then capped as a whole."""
    model_config = _INPUT_CONFIG

    ppf: float = _amount("Public Provident Fund.")
    elss: float = _amount("Equity Linked Savings Scheme.")
    lic: float = _amount("Life insurance premium.")
    nsc: float = _amount("National Savings Certificate.")
    tax_saver_fd: float = _amount("5-year tax-saver fixed deposit.")
    tuition_fees: float = _amount("Children's tuition fees.")
    home_loan_principal: float = _amount("Home loan principal repayment.")
    sukanya_samriddhi: float = _amount("Sukanya Samriddhi Yojana.")
    epf: float = _amount("Employee Provident Fund (employee share).")
    ulip: float = _amount("Unit Linked Insurance Plan premium.")

    def contribution_sum(self) -> float:
        """Uncapped sum of every instrument."""
        return (
            self.ppf + self.elss + self.lic + self.nsc + self.tax_saver_fd
            + self.tuition_fees + self.home_loan_principal + self.sukanya_samriddhi
            + self.epf + self.ulip
        )


class Section80CResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: float                 # min(contribution_sum, 150000)
    breakdown: Section80CInput   # Raw inputs, NOT individually capped
    max_reached: bool            # Uncapped sum >= 150000


# ---------------------------------------------------------------------------
# Section80D — health insurance premiums
# ---------------------------------------------------------------------------

class Section80DInput(BaseModel):
    """
    Health insurance premiums. Self/family and parents caps depend on the
    senior-citizen flags; the preventive checkup cap is fixed.
    """
    model_config = _INPUT_CONFIG

    self_and_family: float = _amount("Premium for self, spouse and children.")
    parents: float = _amount("Premium for parents.")
    preventive_health_checkup: float = _amount("Preventive health checkup spend.")
    is_parent_senior: bool = False
    is_self_senior: bool = False


class Section80DBreakdown(BaseModel):
    """Post-cap amount actually allowed per category."""
    model_config = ConfigDict(frozen=True)

    self_and_family: float
    parents: float
    preventive_health_checkup: float


class Section80DLimits(BaseModel):
    """Caps selected for this calculation, so callers can show 'X of Y used'."""
    model_config = ConfigDict(frozen=True)

    self_limit: float
    parent_limit: float
    health_checkup_limit: float
    total_used: float


class Section80DResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: float
    breakdown: Section80DBreakdown
    limits: Section80DLimits


# ---------------------------------------------------------------------------
# DeductionClaim / DeductionSummary — every provision for one taxpayer
# ---------------------------------------------------------------------------

class DeductionClaim(BaseModel):
    """
    Everything a taxpayer claims, one field per provision.

    Sub-inputs (hra, section_80c, section_80d) are optional; a missing one
    contributes 0. age is required — it drives the 80TTA/80TTB and 80DDB
    cap selection, so a silent default would under-deduct for seniors.

    80GG (rent without HRA) is only allowed when no HRA is claimed.
    """
    model_config = _INPUT_CONFIG

    age: int = Field(..., ge=0, description="Taxpayer's age in completed years.")

    hra: Optional[HRAInput] = None
    section_80c: Optional[Section80CInput] = None
    section_80d: Optional[Section80DInput] = None

    home_loan_interest: float = _amount("Section 24(b) self-occupied interest.")
    savings_interest: float = _amount("Interest for 80TTA (under 60) or 80TTB (60+).")
    education_loan_interest: float = _amount("Section 80E interest. Uncapped.")
    nps_contribution: float = _amount("Additional NPS under 80CCD(1B).")
    medical_treatment: float = _amount("Section 80DDB specified-disease treatment.")
    first_home_loan_interest: float = _amount("Section 80EE interest.")
    affordable_housing_interest: float = _amount("Section 80EEA interest.")
    donations: float = _amount("Section 80G eligible donations.")
    adjusted_gross_total_income: float = _amount("AGTI base for the 80G ceiling.")

    # Fixed deductions — claimed only when the flag is set
    disabled_dependent: bool = False
    disabled_dependent_severe: bool = False
    self_disability: bool = False
    self_disability_severe: bool = False

    # --- Section 80GG — rent paid with no HRA component ---
    rent_paid_without_hra: float = _amount("Annual rent paid when no HRA is received.")
    total_income: float = _amount("Total income, base for the 80GG limits.")

    # --- Salary exemptions ---
    gratuity_salary: float = _amount("Last drawn monthly salary for the gratuity formula.")
    years_of_service: float = _amount("Completed years of service.")
    gratuity_received: float = _amount("Gratuity actually received.")
    children_for_education_allowance: int = Field(default=0, ge=0)
    children_in_hostel: int = Field(default=0, ge=0)
    number_of_meals: int = Field(default=0, ge=0, description="Meals covered by vouchers in the year.")


class DeductionSummary(BaseModel):
    """
    Itemised deductions applied for one claim.

    All values are the ACTUAL deduction applied (after caps), not the raw input.
    """
    model_config = ConfigDict(frozen=True)

    hra_exemption: float = 0
    section_80c: float = 0            # Cap ₹1,50,000 on the sum
    section_80d: float = 0            # Per-category caps, summed
    section_24b: float = 0            # Cap ₹2,00,000
    section_80tta_ttb: float = 0      # ₹10K under 60 / ₹50K at 60+
    section_80e: float = 0            # No cap
    section_80ccd1b: float = 0        # Cap ₹50,000
    section_80ddb: float = 0          # ₹40K under 60 / ₹1L at 60+
    section_80dd: float = 0           # Fixed ₹75K / ₹1.25L severe
    section_80u: float = 0            # Fixed ₹75K / ₹1.25L severe
    section_80ee: float = 0           # Cap ₹50,000
    section_80eea: float = 0          # Cap ₹1,50,000
    section_80g: float = 0            # Cap 10% of AGTI
    section_80gg: float = 0           # Min-of-3, only without HRA
    gratuity: float = 0               # Min of formula, ₹20L, actual
    child_education_allowance: float = 0   # ₹2,400 per child, max 2
    child_hostel_allowance: float = 0      # ₹7,200 per child, max 2
    meal_vouchers: float = 0          # ₹50 per meal, max ₹25,000
    total: float = 0


__all__ = [
    "HRAInput",
    "Section80CInput",
    "Section80CResult",
    "Section80DInput",
    "Section80DBreakdown",
    "Section80DLimits",
    "Section80DResult",
    "DeductionClaim",
    "DeductionSummary",
]
