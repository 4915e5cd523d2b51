import os
from datetime import datetime, timedelta, timezone
from typing import Optional

from ape import networks, project
from ape.contracts import ContractContainer

from sale_deployment.networks import get_chain_id, is_local_network

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_epoch_seconds(instant: datetime) -> int:
    """
    Returns the whole number of seconds elapsed since the unix epoch,
    i.e. floor(milliseconds_since_epoch / 1000). Naive datetimes are taken as UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    milliseconds = (instant - EPOCH) // timedelta(milliseconds=1)
    return milliseconds // 1000


def validate_chain_id(expected_chain_id: Optional[int], local_only: bool = False) -> None:
    """
    Checks that a live deployment targets the chain that the
    network profile was written for. Local-only profiles are
    refused on any live network.
    """
    print("Validating network...")
    if is_local_network():
        return
    if local_only:
        raise ValueError(
            f"Network profile is restricted to local test chains; "
            f"refusing to deploy to chain_id {get_chain_id()}."
        )
    if expected_chain_id is None:
        return

    chain_id = get_chain_id()
    if chain_id != expected_chain_id:
        raise ValueError(
            f"chain_id of network profile ({expected_chain_id}) does not match "
            f"chain_id of current network ({chain_id})."
        )


def check_etherscan_plugin() -> None:
    """
    Checks that the ape-etherscan plugin is installed and that
    the appropriate API key environment variable is set.
    """
    if is_local_network():
        # unnecessary for local deployment
        return
    try:
        from ape_etherscan.utils import API_KEY_ENV_KEY_MAP
    except ImportError:
        raise ImportError("Please install the ape-etherscan plugin to verify contracts.")
    ecosystem_name = networks.provider.network.ecosystem.name
    explorer_envvar = API_KEY_ENV_KEY_MAP.get(ecosystem_name)
    api_key = os.environ.get(explorer_envvar)
    if not api_key:
        raise ValueError(f"{explorer_envvar} is not set.")


def check_infura_plugin() -> None:
    """Checks that the ape-infura plugin is installed."""
    if is_local_network():
        return  # unnecessary for local deployment
    if networks.provider.name != "infura":
        return  # unnecessary when using a provider different than infura
    try:
        from ape_infura.provider import _ENVIRONMENT_VARIABLE_NAMES
    except ImportError:
        raise ImportError("Please install the ape-infura plugin to use this script.")
    for envvar in _ENVIRONMENT_VARIABLE_NAMES:
        api_key = os.environ.get(envvar)
        if api_key:
            break
    else:
        raise ValueError(
            f"No Infura API key found in "
            f"environment variables: {', '.join(_ENVIRONMENT_VARIABLE_NAMES)}"
        )


def check_plugins(verify: bool) -> None:
    print("Checking plugins...")
    if verify:
        check_etherscan_plugin()
    check_infura_plugin()


def _get_dependency_contract_container(contract: str) -> ContractContainer:
    for dependency_name, dependency_versions in project.dependencies.items():
        if len(dependency_versions) > 1:
            raise ValueError(f"Ambiguous {dependency_name} dependency for {contract}")
        try:
            dependency_api = list(dependency_versions.values())[0]
            contract_container = getattr(dependency_api, contract)
            return contract_container
        except AttributeError:
            continue
    raise ValueError(f"No contract found with name '{contract}'.")


def get_contract_container(contract: str) -> ContractContainer:
    """Returns the deployable container for a contract of the active ape project."""
    try:
        contract_container = getattr(project, contract)
    except AttributeError:
        # not in root project; check dependencies
        contract_container = _get_dependency_contract_container(contract)

    return contract_container
