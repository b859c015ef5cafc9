import click
import tomlkit
from pydantic import TypeAdapter

from chaintokens.address import validate_and_parse_address
from chaintokens.chains import get_chain_id
from chaintokens.config import CONFIG_FILE, Settings, save_config_to_file, settings
from chaintokens.currency import Token
from chaintokens.exceptions import InvalidAddress, UnknownChain
from chaintokens.registry import WRAPPED_NATIVE_TOKENS, get_wrapped_native_token
from chaintokens.version import __version__


def _token_to_dict(token: Token) -> dict[str, str | int | None]:
    return {
        "chain_id": int(token.chain_id),
        "address": token.address,
        "decimals": token.decimals,
        "symbol": token.symbol,
        "name": token.name,
        "project_link": token.project_link,
    }


@click.group()
@click.version_option(version=__version__)
def cli() -> None: ...


@cli.group()
def config() -> None:
    """
    Configuration commands
    """


@config.command("show")
@click.option(
    "--json",
    "output_format",
    flag_value="json",
    type=str,
    help="Show configuration in JSON format",
)
@click.option(
    "--toml",
    "output_format",
    flag_value="toml",
    type=str,
    help="Show configuration in TOML format (default)",
    default=True,
)
def config_show(output_format: str) -> None:
    """
    Display the current configuration in JSON or TOML (default) format.
    """

    match output_format:
        case "json":
            click.echo(
                TypeAdapter(dict).dump_json(
                    settings.model_dump(),
                    indent=2,
                ),
            )
        case "toml":
            click.echo(
                tomlkit.dumps(
                    settings.model_dump(),
                ),
            )


@config.command("init")
@click.confirmation_option(prompt="Overwrite any existing configuration file with the defaults?")
def config_init() -> None:
    """
    Write a configuration file with default values.
    """

    save_config_to_file(Settings(), CONFIG_FILE)
    click.echo(f"Wrote default configuration to {CONFIG_FILE}")


@cli.group()
def wrapped() -> None:
    """
    Wrapped native token commands
    """


@wrapped.command("list")
@click.option("--json", "as_json", is_flag=True, help="Show the registry in JSON format")
def wrapped_list(as_json: bool) -> None:
    """
    Display the wrapped native token for every registered chain.
    """

    if as_json:
        click.echo(
            TypeAdapter(list).dump_json(
                [_token_to_dict(token) for token in WRAPPED_NATIVE_TOKENS.values()],
                indent=2,
            ),
        )
        return

    for chain_id, token in sorted(WRAPPED_NATIVE_TOKENS.items()):
        click.echo(f"{chain_id.name:<20} {int(chain_id):>6}  {token.address}  {token.symbol}")


@wrapped.command("show")
@click.argument("chain")
def wrapped_show(chain: str) -> None:
    """
    Display the wrapped native token for CHAIN, given as a chain ID or name (e.g. 1, eth).
    """

    try:
        chain_id = get_chain_id(chain)
    except UnknownChain as exc:
        raise click.ClickException(str(exc.message)) from None

    token = get_wrapped_native_token(chain_id)
    if token is None:
        raise click.ClickException(f"No wrapped native token registered for {chain_id.name}")

    for key, value in _token_to_dict(token).items():
        click.echo(f"{key}: {value}")


@cli.group()
def address() -> None:
    """
    Address commands
    """


@address.command("check")
@click.argument("value")
def address_check(value: str) -> None:
    """
    Validate an address and display its checksummed form.
    """

    try:
        click.echo(validate_and_parse_address(value))
    except InvalidAddress as exc:
        raise click.ClickException(str(exc.message)) from None
