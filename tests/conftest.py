import pytest

from annuity_eda.generators import generate_policy_data
from annuity_eda.models import fit_lapse_model, fit_mortality_model


@pytest.fixture(scope="session")
def policy_data():
    return generate_policy_data()


@pytest.fixture(scope="session")
def mortality_model(policy_data):
    return fit_mortality_model(policy_data)


@pytest.fixture(scope="session")
def lapse_model(policy_data):
    return fit_lapse_model(policy_data)
