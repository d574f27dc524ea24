"""
Configuration for the simulated annuity book and its risk models.

Distribution parameters reproduce the reference exploratory script:
ages around 40, policy amounts around 50k, and biometric / behavioural
probabilities obtained by pushing normal draws through a sigmoid.
"""

from datetime import date

# ---------------- Portfolio size ---------------- #

N_POLICIES: int = 10_000

# Policies start within one year of this date
EPOCH_DATE: date = date(2020, 1, 1)
START_OFFSET_MAX_DAYS: int = 365  # inclusive


# ---------------- Random seed ---------------- #

SEED: int = 123


# ---------------- Demographics ---------------- #

AGE_MEAN: float = 40.0
AGE_SD: float = 10.0

GENDERS = ["Male", "Female"]


# ---------------- Policy details ---------------- #

# Underlying normal of the lognormal policy amount
POLICY_AMOUNT_MEDIAN: float = 50_000.0
POLICY_AMOUNT_SIGMA: float = 0.5

DURATION_MIN_YEARS: int = 15
DURATION_MAX_YEARS: int = 25  # inclusive


# ---------------- Biometric & behavioural risk ---------------- #
# (mean, sd) of the normal draw fed through the sigmoid

MORTALITY_LOGIT = (0.0, 0.3)
MORBIDITY_LOGIT = (0.0, 0.3)
LAPSE_LOGIT = (-1.0, 0.5)  # biased towards low lapse rates


# ---------------- Risk models ---------------- #

MORTALITY_RESPONSE: str = "mortality_prob"
MORTALITY_PREDICTORS = ["age", "gender", "policy_amount"]

LAPSE_RESPONSE: str = "lapse_prob"
LAPSE_PREDICTORS = ["age", "gender", "policy_amount", "duration_years"]

# Treatment coded; levels are taken from the training data, first one is the reference
CATEGORICAL_PREDICTORS = ["gender"]

# statsmodels' IRLS defaults
GLM_MAXITER: int = 100
GLM_TOL: float = 1e-8


# ---------------- Example applicants ---------------- #

EXAMPLE_APPLICANTS = {
    "age": [90, 50],
    "gender": ["Male", "Female"],
    "policy_amount": [55_000.0, 60_000.0],
}
