import click

from sale_deployment.params import SUPPORTED_SALE_NETWORKS
from sale_deployment.types import ChecksumAddress

sale_network_option = click.option(
    "--sale-network",
    "-s",
    help="Network profile to take the sale parameters from",
    type=click.Choice(SUPPORTED_SALE_NETWORKS),
    envvar="SALE_NETWORK",
    required=True,
)

admin_option = click.option(
    "--admin",
    help="Administrator address; overrides the address of the network profile",
    type=ChecksumAddress(),
    required=False,
)

autosign_option = click.option(
    "--autosign",
    help="Sign transactions without asking for confirmation",
    is_flag=True,
    default=False,
)

verify_option = click.option(
    "--verify",
    help="Publish the deployed contracts to the block explorer",
    is_flag=True,
    default=False,
)
