"""
Schema definitions for the simulated annuity book.

These schemas define the **contract** between:
- policy generation
- inspection / plotting
- the mortality & lapse risk models

They mirror the pandas DataFrame columns used throughout the project;
the column lists below are derived from them so the order is defined once.
"""

from dataclasses import dataclass, fields
from datetime import date


# ---------------- Policy ---------------- #

@dataclass
class PolicyRecord:
    policy_id: int
    age: int                # rounded normal draw, not clamped
    gender: str             # "Male" | "Female"
    start_date: date
    policy_amount: float
    duration_years: int
    mortality_prob: float
    morbidity_prob: float
    lapse_prob: float
    persistency_prob: float  # always 1 - lapse_prob


# ---------------- New applicant ---------------- #

@dataclass
class NewApplicant:
    age: int
    gender: str
    policy_amount: float


POLICY_COLUMNS = [f.name for f in fields(PolicyRecord)]
APPLICANT_COLUMNS = [f.name for f in fields(NewApplicant)]

PROBABILITY_COLUMNS = [
    "mortality_prob",
    "morbidity_prob",
    "lapse_prob",
    "persistency_prob",
]
