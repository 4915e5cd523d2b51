from ape import networks

from sale_deployment.constants import LOCAL_BLOCKCHAIN_ENVIRONMENTS


def is_local_network() -> bool:
    """Returns True if the active provider is connected to a local test chain."""
    return networks.provider.network.name in LOCAL_BLOCKCHAIN_ENVIRONMENTS


def get_chain_id() -> int:
    return networks.provider.network.chain_id
