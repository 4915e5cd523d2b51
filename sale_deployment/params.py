import typing
from collections import OrderedDict
from datetime import datetime, timezone
from typing import Dict, List, Optional, Union

from eth_typing import ChecksumAddress
from eth_utils import is_address

from sale_deployment.constants import (
    DEVELOPMENT,
    DEVELOPMENT_ADMIN,
    MAINNET,
    MAINNET_SALE_END,
    MAINNET_SALE_START,
    RATE,
    SALE_DURATION,
    SEPOLIA,
)
from sale_deployment.utils import to_epoch_seconds

Amount = Union[int, float]


class UnknownNetworkError(ValueError):
    """Raised when there are no deployment parameters for a network."""

    def __init__(self, network: str):
        self.network = network
        super().__init__(
            f"Unknown network '{network}'; "
            f"expected one of {', '.join(SUPPORTED_SALE_NETWORKS)}."
        )


class NetworkProfile(typing.NamedTuple):
    """Parameter set of a single deployment target."""

    admin: str
    funding_min: Amount
    funding_cap: Amount
    chain_id: Optional[int] = None
    # deployable only to a local test chain
    local_only: bool = False
    # (start, end) of a fixed sale window; the window opens at deployment time otherwise
    window: Optional[typing.Tuple[datetime, datetime]] = None


NETWORK_PROFILES: Dict[str, NetworkProfile] = {
    DEVELOPMENT: NetworkProfile(
        admin=DEVELOPMENT_ADMIN,
        funding_min=0.001,
        funding_cap=100,
        local_only=True,
    ),
    SEPOLIA: NetworkProfile(
        admin="0xc1c13ed18081b6b1a9f6caa9e519cdc42b895c78",
        funding_min=0.001,
        funding_cap=999999999999,
        chain_id=11155111,
    ),
    MAINNET: NetworkProfile(
        admin="0x0f4eA45B015ac982380ede40F53c5208e697eDC1",
        funding_min=0.001,
        funding_cap=999999999999,
        chain_id=1,
        window=(MAINNET_SALE_START, MAINNET_SALE_END),
    ),
}

SUPPORTED_SALE_NETWORKS: List[str] = list(NETWORK_PROFILES)


class DeploymentParameters(typing.NamedTuple):
    """Resolved constructor inputs for the token and sale contracts."""

    network: str
    admin: str
    funding_min: Amount
    funding_cap: Amount
    rate: int
    start_time: int
    end_time: int

    class Invalid(ValueError):
        """Raised when the resolved parameters are inconsistent"""

    def validate(self) -> "DeploymentParameters":
        if not self.admin or not is_address(self.admin):
            raise self.Invalid(f"Admin '{self.admin}' is not a valid address.")
        if not 0 <= self.funding_min <= self.funding_cap:
            raise self.Invalid(
                f"Funding bounds must satisfy 0 <= min <= cap; "
                f"got min={self.funding_min}, cap={self.funding_cap}."
            )
        if self.start_time >= self.end_time:
            raise self.Invalid(
                f"Sale start ({self.start_time}) must be before its end ({self.end_time})."
            )
        return self

    def token_constructor_params(self) -> OrderedDict:
        return OrderedDict(admin=self.admin)

    def sale_constructor_params(self, token_address: ChecksumAddress) -> OrderedDict:
        return OrderedDict(
            admin=self.admin,
            fundingMin=self.funding_min,
            fundingCap=self.funding_cap,
            startTime=self.start_time,
            endTime=self.end_time,
            rate=self.rate,
            token=token_address,
        )


def get_profile(network: str) -> NetworkProfile:
    try:
        return NETWORK_PROFILES[network]
    except KeyError:
        raise UnknownNetworkError(network)


def _sale_window(profile: NetworkProfile, now: Optional[datetime]) -> typing.Tuple[int, int]:
    if profile.window is not None:
        start, end = profile.window
        return to_epoch_seconds(start), to_epoch_seconds(end)

    now = now or datetime.now(tz=timezone.utc)
    start_time = to_epoch_seconds(now)
    return start_time, start_time + SALE_DURATION


def resolve_parameters(
    network: str,
    now: Optional[datetime] = None,
    admin: Optional[str] = None,
) -> DeploymentParameters:
    """
    Resolves the deployment parameters of a network.

    Sale windows of networks without a fixed window start at `now`
    (the current time unless given) and last 30 days. An explicit `admin`
    replaces the network's administrator address.
    """
    profile = get_profile(network)
    start_time, end_time = _sale_window(profile, now)
    parameters = DeploymentParameters(
        network=network,
        admin=admin or profile.admin,
        funding_min=profile.funding_min,
        funding_cap=profile.funding_cap,
        rate=RATE,
        start_time=start_time,
        end_time=end_time,
    )
    return parameters.validate()
