import typing
from collections import OrderedDict
from enum import Enum
from typing import Any, Callable, Dict

from ape.api import AccountAPI
from ape.cli.choices import select_account
from ape.contracts.base import ContractContainer, ContractInstance
from ape.exceptions import ApeException

from sale_deployment.confirm import _confirm_resolution, _continue
from sale_deployment.constants import SALE_CONTRACT, TOKEN_CONTRACT
from sale_deployment.params import DeploymentParameters
from sale_deployment.utils import get_contract_container

ArtifactProvider = Callable[[str], ContractContainer]


class DeploymentStage(Enum):
    TOKEN = TOKEN_CONTRACT
    SALE = SALE_CONTRACT


class DeploymentFailure(Exception):
    """Raised when the network layer fails to deploy one of the sale contracts."""

    def __init__(self, stage: DeploymentStage, reason: Any = None):
        self.stage = stage
        message = f"Deployment of {stage.value} failed"
        if reason is not None:
            message = f"{message}: {reason}"
        super().__init__(message)


class SaleDeployment(typing.NamedTuple):
    token: ContractInstance
    sale: ContractInstance


class SaleDeployer:
    """
    Represents an ape account plus validated/annotated execution
    of the two step token sale deployment.

    The sale contract is constructed with the address of the token contract,
    so the token is always deployed (and confirmed) first. Deployments are not
    transactional: if the sale fails, the token stays deployed.
    """

    def __init__(
        self,
        account: typing.Optional[AccountAPI] = None,
        autosign: bool = False,
        verify: bool = False,
    ):
        if account is None:
            self._account = select_account()
        else:
            self._account = account
        if autosign:
            print("WARNING: Autosign is enabled. Transactions will be signed automatically.")
        self._autosign = autosign
        self._account.set_autosign(autosign)
        self.verify = verify

    def get_account(self) -> AccountAPI:
        """Returns the deployer account."""
        return self._account

    def _get_kwargs(self) -> Dict[str, Any]:
        """Returns the deployment kwargs."""
        return {"publish": self.verify}

    def deploy(
        self,
        params: DeploymentParameters,
        artifacts: ArtifactProvider = get_contract_container,
    ) -> SaleDeployment:
        # both artifacts are loaded before anything is sent to the network
        token_container = artifacts(TOKEN_CONTRACT)
        sale_container = artifacts(SALE_CONTRACT)

        print(f"Deploying contracts on: {params.network}")
        self._print_deployment_info(params)
        if not self._autosign:
            # Confirms the start of the deployment.
            _continue()

        token = self._deploy_stage(
            DeploymentStage.TOKEN,
            container=token_container,
            resolved_params=params.token_constructor_params(),
        )
        sale = self._deploy_stage(
            DeploymentStage.SALE,
            container=sale_container,
            resolved_params=params.sale_constructor_params(token_address=token.address),
        )
        return SaleDeployment(token=token, sale=sale)

    def _deploy_stage(
        self,
        stage: DeploymentStage,
        container: ContractContainer,
        resolved_params: OrderedDict,
    ) -> ContractInstance:
        try:
            instance = self._deploy_contract(stage.value, container, resolved_params)
        except ApeException as e:
            raise DeploymentFailure(stage, reason=e) from e
        print(f"'{stage.value}' deployed to: {instance.address}")
        return instance

    def _deploy_contract(
        self, contract_name: str, container: ContractContainer, resolved_params: OrderedDict
    ) -> ContractInstance:
        if not self._autosign:
            _confirm_resolution(resolved_params, contract_name)
        deployment_params = [container, *resolved_params.values()]
        kwargs = self._get_kwargs()

        deployer_account = self.get_account()
        return deployer_account.deploy(*deployment_params, **kwargs)

    def _print_deployment_info(self, params: DeploymentParameters):
        print(
            f"Account: {self.get_account().address}",
            f"Admin: {params.admin}",
            f"Funding: {params.funding_min} - {params.funding_cap}",
            f"Rate: {params.rate}",
            f"Sale window: {params.start_time} - {params.end_time}",
            f"Verify: {self.verify}",
            sep="\n",
        )
