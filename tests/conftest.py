import typing

import pytest
from ape.exceptions import ApeException

from sale_deployment.constants import SALE_CONTRACT, TOKEN_CONTRACT

DEPLOYER_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

DEPLOYED_ADDRESSES = {
    TOKEN_CONTRACT: "0x5FbDB2315678afecb367f032d93F642f64180aa3",
    SALE_CONTRACT: "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512",
}


class FakeContractInstance(typing.NamedTuple):
    name: str
    address: str


class FakeContractContainer(typing.NamedTuple):
    name: str


class FakeAccount:
    """Records deploy calls instead of submitting transactions."""

    address = DEPLOYER_ADDRESS

    def __init__(self, failing_contracts=()):
        self.failing_contracts = failing_contracts
        self.autosign = None
        self.deploy_calls = []

    def set_autosign(self, enabled):
        self.autosign = enabled

    def deploy(self, container, *args, **kwargs):
        self.deploy_calls.append((container.name, args, kwargs))
        if container.name in self.failing_contracts:
            raise ApeException(f"{container.name} reverted")
        return FakeContractInstance(name=container.name, address=DEPLOYED_ADDRESSES[container.name])

    @property
    def deployed_contract_names(self):
        return [name for name, _, _ in self.deploy_calls]


@pytest.fixture
def deployer_account():
    return FakeAccount()


@pytest.fixture
def artifacts():
    requested = []

    def get_contract_container(contract_name):
        requested.append(contract_name)
        return FakeContractContainer(name=contract_name)

    get_contract_container.requested = requested
    return get_contract_container
