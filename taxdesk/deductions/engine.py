"""
TaxDesk Deduction Engine
Pure Python, deterministic. Same input → same output. No I/O.

Rules for Chapter VI-A deductions, Section 24(b) and the salary exemptions the
practice calculator offers. Every rule takes non-negative amounts and returns
the amount actually allowed. Negative inputs are outside the contract and are
not checked here — input models reject them at construction.
"""
from __future__ import annotations

import logging

from taxdesk.deductions.schemas import (
    DeductionClaim,
    DeductionSummary,
    HRAInput,
    Section80CInput,
    Section80CResult,
    Section80DBreakdown,
    Section80DInput,
    Section80DLimits,
    Section80DResult,
)

logger = logging.getLogger(__name__)

# ===========================================================================
# AGE THRESHOLD
# ===========================================================================

SENIOR_CITIZEN_AGE       = 60

# ===========================================================================
# HRA — Section 10(13A), Rule 2A
# ===========================================================================

HRA_METRO_PCT            = 0.50
HRA_NON_METRO_PCT        = 0.40
HRA_RENT_BASIC_PCT       = 0.10      # Rent in excess of 10% of basic

# ===========================================================================
# DEDUCTION CAP CONSTANTS
# ===========================================================================

CAP_80C                  = 150_000

CAP_80D_SELF_NON_SENIOR  = 25_000
CAP_80D_SELF_SENIOR      = 50_000
CAP_80D_PARENTS_NON_SENIOR = 25_000
CAP_80D_PARENTS_SENIOR   = 50_000
CAP_80D_HEALTH_CHECKUP   = 5_000     # Same for every age

CAP_24B                  = 200_000   # Self-occupied home loan interest
CAP_80TTA                = 10_000    # Savings interest — under 60
CAP_80TTB                = 50_000    # Deposit interest — 60 and above
CAP_80CCD1B              = 50_000    # Additional NPS

CAP_80DDB_NON_SENIOR     = 40_000
CAP_80DDB_SENIOR         = 100_000
DED_80DD_NORMAL          = 75_000    # Fixed, not a cap
DED_80DD_SEVERE          = 125_000
DED_80U_NORMAL           = 75_000
DED_80U_SEVERE           = 125_000
CAP_80EE                 = 50_000
CAP_80EEA                = 150_000
CAP_80G_AGTI_PCT         = 0.10

CAP_80GG_ANNUAL          = 60_000    # ₹5,000 per month
CAP_80GG_INCOME_PCT      = 0.25
RENT_80GG_INCOME_PCT     = 0.10

# ===========================================================================
# SALARY EXEMPTION CONSTANTS
# ===========================================================================

ALLOWANCE_MAX_CHILDREN   = 2
CHILD_EDUCATION_ANNUAL   = 2_400     # ₹100 per month per child
CHILD_HOSTEL_ANNUAL      = 7_200     # ₹300 per month per child
MEAL_VOUCHER_PER_MEAL    = 50
MEAL_VOUCHER_DAILY_MAX   = 100       # Two meals a day
WORKING_DAYS_PER_YEAR    = 250
CAP_GRATUITY             = 2_000_000


# ===========================================================================
# HRA
# ===========================================================================

def calculate_hra_exemption(data: HRAInput) -> float:
    """
    HRA exemption under Section 10(13A), Rule 2A — minimum of three components.

    Component 1: HRA received from employer
    Component 2: 50% of basic_salary (metro) or 40% (non-metro)
    Component 3: max(0, rent_paid - 10% of basic_salary)  ← clipped at 0
    """
    metro_pct = HRA_METRO_PCT if data.is_metro_city else HRA_NON_METRO_PCT
    component_1 = data.hra_received
    component_2 = data.basic_salary * metro_pct
    component_3 = max(0.0, data.rent_paid - data.basic_salary * HRA_RENT_BASIC_PCT)
    return min(component_1, component_2, component_3)


# ===========================================================================
# 80C / 80D AGGREGATORS
# ===========================================================================

def calculate_section_80c(data: Section80CInput) -> Section80CResult:
    """
    80C: one combined ceiling over every instrument.
    The breakdown is the raw input — instruments are not capped individually.
    """
    contributions = data.contribution_sum()
    return Section80CResult(
        total=min(contributions, CAP_80C),
        breakdown=data,
        max_reached=contributions >= CAP_80C,
    )


def calculate_section_80d(data: Section80DInput) -> Section80DResult:
    """
    80D: independent caps per category — NO combined cap.
    Self cap: is_self_senior. Parent cap: is_parent_senior. Checkup cap: fixed.
    """
    self_limit   = CAP_80D_SELF_SENIOR if data.is_self_senior else CAP_80D_SELF_NON_SENIOR
    parent_limit = CAP_80D_PARENTS_SENIOR if data.is_parent_senior else CAP_80D_PARENTS_NON_SENIOR

    self_amount     = min(data.self_and_family, self_limit)
    parent_amount   = min(data.parents, parent_limit)
    checkup_amount  = min(data.preventive_health_checkup, CAP_80D_HEALTH_CHECKUP)
    total = self_amount + parent_amount + checkup_amount

    return Section80DResult(
        total=total,
        breakdown=Section80DBreakdown(
            self_and_family=self_amount,
            parents=parent_amount,
            preventive_health_checkup=checkup_amount,
        ),
        limits=Section80DLimits(
            self_limit=self_limit,
            parent_limit=parent_limit,
            health_checkup_limit=CAP_80D_HEALTH_CHECKUP,
            total_used=total,
        ),
    )


# ===========================================================================
# SINGLE-CAP RULES
# ===========================================================================

def calculate_home_loan_interest(interest: float) -> float:
    """Section 24(b), self-occupied property."""
    return min(interest, CAP_24B)


def calculate_section_80tta(interest: float, age: int) -> float:
    """
    Under 60 → 80TTA (savings interest, cap ₹10K).
    60 and above → 80TTB (all deposit interest, cap ₹50K).
    """
    cap = CAP_80TTB if age >= SENIOR_CITIZEN_AGE else CAP_80TTA
    return min(interest, cap)


def calculate_section_80e(interest: float) -> float:
    """Education loan interest has no monetary ceiling."""
    return interest


def calculate_nps_deduction(contribution: float) -> float:
    """Additional employee NPS contribution, 80CCD(1B)."""
    return min(contribution, CAP_80CCD1B)


def calculate_section_80ddb(amount: float, age: int) -> float:
    cap = CAP_80DDB_SENIOR if age >= SENIOR_CITIZEN_AGE else CAP_80DDB_NON_SENIOR
    return min(amount, cap)


def calculate_section_80dd(is_severe_disability: bool) -> float:
    """Disabled dependant — fixed deduction regardless of actual spend."""
    return DED_80DD_SEVERE if is_severe_disability else DED_80DD_NORMAL


def calculate_section_80u(is_severe_disability: bool) -> float:
    """Taxpayer's own disability — fixed deduction."""
    return DED_80U_SEVERE if is_severe_disability else DED_80U_NORMAL


def calculate_section_80ee(interest: float) -> float:
    return min(interest, CAP_80EE)


def calculate_section_80eea(interest: float) -> float:
    return min(interest, CAP_80EEA)


def calculate_section_80g(donations: float, adjusted_gross_total_income: float) -> float:
    """Qualifying donations, limited to 10% of adjusted gross total income."""
    return min(donations, adjusted_gross_total_income * CAP_80G_AGTI_PCT)


def calculate_section_80gg(rent_paid: float, total_income: float) -> float:
    """
    Rent paid without HRA — minimum of three components.

    Component 1: max(0, rent_paid - 10% of total income)
    Component 2: ₹60,000 a year
    Component 3: 25% of total income
    """
    component_1 = max(0.0, rent_paid - total_income * RENT_80GG_INCOME_PCT)
    component_3 = total_income * CAP_80GG_INCOME_PCT
    return min(component_1, CAP_80GG_ANNUAL, component_3)


# ===========================================================================
# SALARY EXEMPTIONS
# ===========================================================================

def calculate_child_education_allowance(number_of_children: int) -> float:
    return min(number_of_children, ALLOWANCE_MAX_CHILDREN) * CHILD_EDUCATION_ANNUAL


def calculate_child_hostel_allowance(number_of_children: int) -> float:
    return min(number_of_children, ALLOWANCE_MAX_CHILDREN) * CHILD_HOSTEL_ANNUAL


def calculate_meal_vouchers(number_of_meals: int) -> float:
    """₹50 per meal, at most two meals a day over 250 working days."""
    return min(
        number_of_meals * MEAL_VOUCHER_PER_MEAL,
        MEAL_VOUCHER_DAILY_MAX * WORKING_DAYS_PER_YEAR,
    )


def calculate_gratuity(salary: float, years_of_service: float, actual_gratuity: float) -> float:
    """
    Exempt gratuity — minimum of:
      15 days' salary per completed year (15 × salary × years / 26),
      the ₹20 lakh ceiling, and the gratuity actually received.
    """
    formula = (15 * salary * years_of_service) / 26
    return min(formula, CAP_GRATUITY, actual_gratuity)


# ===========================================================================
# COMBINED SUMMARY — public API
# ===========================================================================

def calculate_total_deductions(claim: DeductionClaim) -> DeductionSummary:
    """
    Apply every rule to its claim field and add up the allowed amounts.

    Missing sub-inputs contribute 0. Fixed deductions (80DD, 80U) count only
    when their flag is set. 80GG counts only when no HRA is claimed.
    Salary exemptions (gratuity, child allowances, meal vouchers) are added
    alongside the Chapter VI-A deductions.
    """
    ded_hra     = calculate_hra_exemption(claim.hra) if claim.hra is not None else 0.0
    ded_80c     = calculate_section_80c(claim.section_80c).total if claim.section_80c is not None else 0.0
    ded_80d     = calculate_section_80d(claim.section_80d).total if claim.section_80d is not None else 0.0
    ded_24b     = calculate_home_loan_interest(claim.home_loan_interest)
    ded_80tta   = calculate_section_80tta(claim.savings_interest, claim.age)
    ded_80e     = calculate_section_80e(claim.education_loan_interest)
    ded_80ccd1b = calculate_nps_deduction(claim.nps_contribution)
    ded_80ddb   = calculate_section_80ddb(claim.medical_treatment, claim.age)
    ded_80dd    = (
        calculate_section_80dd(claim.disabled_dependent_severe)
        if claim.disabled_dependent else 0.0
    )
    ded_80u     = (
        calculate_section_80u(claim.self_disability_severe)
        if claim.self_disability else 0.0
    )
    ded_80ee    = calculate_section_80ee(claim.first_home_loan_interest)
    ded_80eea   = calculate_section_80eea(claim.affordable_housing_interest)
    ded_80g     = calculate_section_80g(claim.donations, claim.adjusted_gross_total_income)
    ded_80gg    = (
        calculate_section_80gg(claim.rent_paid_without_hra, claim.total_income)
        if claim.hra is None else 0.0
    )

    ex_gratuity  = calculate_gratuity(
        claim.gratuity_salary, claim.years_of_service, claim.gratuity_received,
    )
    ex_education = calculate_child_education_allowance(claim.children_for_education_allowance)
    ex_hostel    = calculate_child_hostel_allowance(claim.children_in_hostel)
    ex_meals     = calculate_meal_vouchers(claim.number_of_meals)

    total = (
        ded_hra + ded_80c + ded_80d + ded_24b + ded_80tta + ded_80e + ded_80ccd1b
        + ded_80ddb + ded_80dd + ded_80u + ded_80ee + ded_80eea + ded_80g + ded_80gg
        + ex_gratuity + ex_education + ex_hostel + ex_meals
    )
    logger.debug("Deduction summary computed total=%.2f age=%d", total, claim.age)

    return DeductionSummary(
        hra_exemption=ded_hra,
        section_80c=ded_80c,
        section_80d=ded_80d,
        section_24b=ded_24b,
        section_80tta_ttb=ded_80tta,
        section_80e=ded_80e,
        section_80ccd1b=ded_80ccd1b,
        section_80ddb=ded_80ddb,
        section_80dd=ded_80dd,
        section_80u=ded_80u,
        section_80ee=ded_80ee,
        section_80eea=ded_80eea,
        section_80g=ded_80g,
        section_80gg=ded_80gg,
        gratuity=ex_gratuity,
        child_education_allowance=ex_education,
        child_hostel_allowance=ex_hostel,
        meal_vouchers=ex_meals,
        total=total,
    )


__all__ = [
    "calculate_hra_exemption",
    "calculate_section_80c",
    "calculate_section_80d",
    "calculate_home_loan_interest",
    "calculate_section_80tta",
    "calculate_section_80e",
    "calculate_nps_deduction",
    "calculate_section_80ddb",
    "calculate_section_80dd",
    "calculate_section_80u",
    "calculate_section_80ee",
    "calculate_section_80eea",
    "calculate_section_80g",
    "calculate_section_80gg",
    "calculate_child_education_allowance",
    "calculate_child_hostel_allowance",
    "calculate_meal_vouchers",
    "calculate_gratuity",
    "calculate_total_deductions",
]
