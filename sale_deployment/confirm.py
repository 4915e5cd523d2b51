import sys
from collections import OrderedDict
from datetime import datetime, timezone
from typing import Any

from ape.utils import ZERO_ADDRESS

# constructor parameters holding epoch seconds
TIMESTAMP_PARAMETERS = ("startTime", "endTime")


def _ask(question: str) -> None:
    """Aborts the deployment unless the user agrees."""
    answer = input(f"{question} Y/N? ")
    if answer.lower().strip() == "n":
        print("Aborting deployment!")
        sys.exit(-1)


def _continue() -> None:
    """Asks the user to continue."""
    _ask("Continue")


def _format_value(name: str, value: Any) -> str:
    if name in TIMESTAMP_PARAMETERS:
        instant = datetime.fromtimestamp(value, tz=timezone.utc)
        return f"{value} ({instant:%Y-%m-%d %H:%M:%S} UTC)"
    return str(value)


def _confirm_resolution(resolved_params: OrderedDict, contract_name: str) -> None:
    """
    Prints the constructor parameters of a sale contract and asks the user to
    confirm its deployment. A zero address (e.g. an unset admin) needs a second
    confirmation, since it would lock the sale proceeds or the token supply.
    """
    print(f"\nConstructor parameters for {contract_name}")
    for name, resolved_value in resolved_params.items():
        print(f"\t{name}={_format_value(name, resolved_value)}")
    _ask(f"Deploy {contract_name}")

    zero_address_params = [
        name for name, value in resolved_params.items() if value == ZERO_ADDRESS
    ]
    if zero_address_params:
        _ask(f"Zero Address detected for {', '.join(zero_address_params)}; Continue?")
