#!/usr/bin/python3

import click
from ape.cli import ConnectedProviderCommand, account_option, network_option

from sale_deployment.deployer import DeploymentFailure, SaleDeployer
from sale_deployment.options import (
    admin_option,
    autosign_option,
    sale_network_option,
    verify_option,
)
from sale_deployment.params import DeploymentParameters, get_profile, resolve_parameters
from sale_deployment.utils import check_plugins, validate_chain_id


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@account_option()
@sale_network_option
@admin_option
@autosign_option
@verify_option
def cli(network, account, sale_network, admin, autosign, verify):
    """
    Deploys the CHIP token, then the CHIP sale wired to the token address.

    ape run deploy_sale --network ethereum:local:test --sale-network development --autosign
    """
    try:
        params = resolve_parameters(sale_network, admin=admin)
    except DeploymentParameters.Invalid as e:
        raise click.ClickException(str(e)) from e

    profile = get_profile(sale_network)
    try:
        validate_chain_id(profile.chain_id, local_only=profile.local_only)
        check_plugins(verify=verify)
    except (ValueError, ImportError) as e:
        raise click.ClickException(str(e)) from e

    deployer = SaleDeployer(account=account, autosign=autosign, verify=verify)
    try:
        deployments = deployer.deploy(params)
    except (DeploymentFailure, ValueError) as e:
        raise click.ClickException(str(e)) from e

    print(
        f"\nToken: {deployments.token.address}",
        f"Sale: {deployments.sale.address}",
        sep="\n",
    )


if __name__ == "__main__":
    cli()
