from typing import Optional
import typer
import asyncio
import logging
from typing_extensions import Annotated
from rich.console import Console

from solana_autotrader.client.autotrading import AutoTradingClient
from solana_autotrader.domains.wallet import Chain
from solana_autotrader.exceptions import AutotraderError
from solana_autotrader.runtime import SettingsRuntime
from solana_autotrader.services.wallet import WalletProvider, resolve_keypair

# --- Basic Logging Configuration ---
logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
# --- End Logging Configuration ---

app = typer.Typer()
console = Console()

ConfigOption = Annotated[
    Optional[str],
    typer.Option(help="Path to a JSON settings file; environment variables fill the rest."),
]


def load_runtime(config: Optional[str]) -> SettingsRuntime:
    """Build the runtime from a settings file, or the environment alone."""
    if not config:
        return SettingsRuntime()
    try:
        return SettingsRuntime.from_file(config)
    except FileNotFoundError:
        console.print(
            f"[bold red]Error:[/bold red] Configuration file not found at '{config}'"
        )
        raise typer.Exit(code=1)
    except ValueError as e:
        console.print(f"[bold red]Error loading configuration:[/bold red] {e}")
        raise typer.Exit(code=1)


async def run_client(client: AutoTradingClient) -> None:
    """Poll until cancelled, then release the client."""
    await client.start()
    try:
        await client.wait()
    finally:
        await client.stop()


async def show_balance(
    runtime: SettingsRuntime, token: Optional[str], chain: Optional[Chain]
) -> None:
    async with WalletProvider(runtime) as wallet:
        result = await wallet.fetch_balance(token, chain)
        address = wallet.get_address()

    balance = result.balance
    console.print(f"[bright_blue]Wallet:[/bright_blue] {address}")
    if result.ok:
        console.print(f"{balance.name} balance: [bold]{balance.formatted}[/bold] {balance.symbol}")
    else:
        console.print(f"[yellow]Balance unavailable:[/yellow] {result.error}")


@app.command()
def run(
    config: ConfigOption = None,
    interval: Annotated[
        Optional[float],
        typer.Option(help="Seconds between balance polls (overrides AUTOTRADER_POLL_INTERVAL)."),
    ] = None,
):
    """
    Start the auto trading client and log the wallet balance on every poll.
    Press Ctrl+C to stop.
    """
    runtime = load_runtime(config)
    try:
        client = AutoTradingClient(runtime, interval=interval)
        asyncio.run(run_client(client))
    except KeyboardInterrupt:
        console.print("\n[yellow]Auto trading client stopped.[/yellow]")
    except (AutotraderError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)


@app.command()
def balance(
    config: ConfigOption = None,
    token: Annotated[
        Optional[str], typer.Option(help="Token mint address; omit for the SOL balance.")
    ] = None,
    chain: Annotated[
        Optional[Chain], typer.Option(help="Chain of the token; inferred when omitted.")
    ] = None,
):
    """
    Print the wallet's SOL balance or its balance of a token.
    """
    runtime = load_runtime(config)
    try:
        asyncio.run(show_balance(runtime, token, chain))
    except AutotraderError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)


@app.command()
def address(config: ConfigOption = None):
    """
    Print the wallet's public address.
    """
    runtime = load_runtime(config)
    try:
        console.print(str(resolve_keypair(runtime).pubkey()))
    except AutotraderError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
