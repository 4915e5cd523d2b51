import time
from datetime import datetime, timezone

import pytest

from sale_deployment.constants import (
    DEVELOPMENT,
    DEVELOPMENT_ADMIN,
    MAINNET,
    RATE,
    SALE_DURATION,
    SEPOLIA,
)
from sale_deployment.params import (
    NETWORK_PROFILES,
    SUPPORTED_SALE_NETWORKS,
    DeploymentParameters,
    UnknownNetworkError,
    get_profile,
    resolve_parameters,
)

NOW = datetime(2024, 5, 17, 12, 30, 15, 250000, tzinfo=timezone.utc)
NOW_EPOCH_SECONDS = 1715949015

ADMIN_OVERRIDE = "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC"


def test_supported_networks():
    assert SUPPORTED_SALE_NETWORKS == [DEVELOPMENT, SEPOLIA, MAINNET]
    assert set(NETWORK_PROFILES) == set(SUPPORTED_SALE_NETWORKS)


@pytest.mark.parametrize("network", SUPPORTED_SALE_NETWORKS)
def test_resolved_parameters_are_consistent(network):
    params = resolve_parameters(network)
    assert params.network == network
    assert params.start_time < params.end_time
    assert 0 <= params.funding_min <= params.funding_cap
    assert params.admin
    assert params.rate == RATE == 10000
    assert isinstance(params.start_time, int)
    assert isinstance(params.end_time, int)


def test_development_parameters():
    params = resolve_parameters(DEVELOPMENT, now=NOW)
    assert params == DeploymentParameters(
        network=DEVELOPMENT,
        admin=DEVELOPMENT_ADMIN,
        funding_min=0.001,
        funding_cap=100,
        rate=10000,
        start_time=NOW_EPOCH_SECONDS,
        end_time=NOW_EPOCH_SECONDS + 2_592_000,
    )


@pytest.mark.parametrize("network", [DEVELOPMENT, SEPOLIA])
def test_sale_window_starts_now_and_lasts_thirty_days(network):
    before = int(time.time())
    params = resolve_parameters(network)
    after = int(time.time())

    assert params.end_time - params.start_time == SALE_DURATION == 2_592_000
    assert before <= params.start_time <= after + 1


def test_mainnet_sale_window_is_fixed():
    params = resolve_parameters(MAINNET, now=NOW)
    assert params.start_time == 1522540800
    assert params.end_time == 4070908800
    assert params.funding_cap == 999999999999
    assert params.admin == "0x0f4eA45B015ac982380ede40F53c5208e697eDC1"

    # independent of the time of resolution
    assert resolve_parameters(MAINNET) == params


@pytest.mark.parametrize("network", ["rinkeby", "ropsten", "Development", ""])
def test_unknown_network(network):
    with pytest.raises(UnknownNetworkError, match="Unknown network") as exc_info:
        resolve_parameters(network)
    assert exc_info.value.network == network

    with pytest.raises(ValueError):
        get_profile(network)


def test_admin_override():
    params = resolve_parameters(SEPOLIA, admin=ADMIN_OVERRIDE)
    assert params.admin == ADMIN_OVERRIDE
    assert params.funding_cap == NETWORK_PROFILES[SEPOLIA].funding_cap


def test_invalid_admin_override():
    with pytest.raises(DeploymentParameters.Invalid, match="not a valid address"):
        resolve_parameters(DEVELOPMENT, admin="0xdeadbeef")


def _parameters(**overrides):
    values = dict(
        network=DEVELOPMENT,
        admin=DEVELOPMENT_ADMIN,
        funding_min=0.001,
        funding_cap=100,
        rate=RATE,
        start_time=NOW_EPOCH_SECONDS,
        end_time=NOW_EPOCH_SECONDS + SALE_DURATION,
    )
    values.update(overrides)
    return DeploymentParameters(**values)


@pytest.mark.parametrize(
    "overrides",
    [
        {"admin": ""},
        {"admin": "admin"},
        {"funding_min": -1},
        {"funding_min": 101},
        {"end_time": NOW_EPOCH_SECONDS},
        {"start_time": NOW_EPOCH_SECONDS + 1, "end_time": NOW_EPOCH_SECONDS},
    ],
)
def test_invalid_parameters(overrides):
    with pytest.raises(DeploymentParameters.Invalid):
        _parameters(**overrides).validate()


def test_equal_funding_bounds_are_valid():
    params = _parameters(funding_min=100, funding_cap=100)
    assert params.validate() is params


def test_sale_constructor_params_order():
    params = _parameters()
    token_address = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
    sale_params = params.sale_constructor_params(token_address=token_address)
    assert list(sale_params) == [
        "admin",
        "fundingMin",
        "fundingCap",
        "startTime",
        "endTime",
        "rate",
        "token",
    ]
    assert list(sale_params.values()) == [
        DEVELOPMENT_ADMIN,
        0.001,
        100,
        NOW_EPOCH_SECONDS,
        NOW_EPOCH_SECONDS + SALE_DURATION,
        RATE,
        token_address,
    ]
    assert list(params.token_constructor_params().values()) == [DEVELOPMENT_ADMIN]
