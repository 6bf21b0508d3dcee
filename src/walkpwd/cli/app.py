"""
Main Typer application for the walkpwd CLI.

Translates commands into vault, generator and clipboard calls. Every
command except init requires an initialized vault.
"""

from typing import Annotated

import typer
from rich.markup import escape

from walkpwd import __version__
from walkpwd.cli.output import (
    configure_logging,
    console,
    print_error,
    print_info,
    print_plain,
    print_success,
    print_warning,
)
from walkpwd.clipboard import ClipboardUnavailableError, build_delivery
from walkpwd.config import ConfigurationError, get_config
from walkpwd.vault import (
    GenerationError,
    NotInitializedError,
    VaultError,
    VaultLifecycle,
    VaultStore,
    generate_password,
)

app = typer.Typer(
    name="walkpwd",
    help="A local CLI password manager.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"walkpwd version [green]{__version__}[/green]")
        raise typer.Exit()


# noinspection PyUnusedLocal
@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug logging on stderr.",
        ),
    ] = False,
) -> None:
    """
    [bold blue]walkpwd[/bold blue] - local password vault

    Secrets are stored in a plaintext vault file and copied to the clipboard
    on retrieval. Run [bold]walkpwd init[/bold] once before other commands.
    """
    configure_logging(verbose)


def _open_store() -> VaultStore:
    """Check the initialization gate and return the store."""
    lifecycle = VaultLifecycle()
    try:
        lifecycle.require_initialized()
    except NotInitializedError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)
    return lifecycle.store


def _copy_to_clipboard(text: str) -> None:
    """Deliver text to the clipboard or exit with an error."""
    try:
        build_delivery().deliver(text)
    except ClipboardUnavailableError as e:
        print_error(f"Could not copy to clipboard: {e}")
        console.print(f"[dim]{escape(e.get_attempt_summary())}[/dim]")
        raise typer.Exit(1)
    except ConfigurationError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Replace an existing vault file with an empty one.",
        ),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip confirmation.",
        ),
    ] = False,
) -> None:
    """Initialize the password vault."""
    lifecycle = VaultLifecycle()

    if force and lifecycle.store.vault_path.exists() and not yes:
        if not typer.confirm("Discard every stored password and reset the vault?"):
            print_warning("Vault left unchanged.")
            raise typer.Exit(1)

    try:
        result = lifecycle.init(overwrite=force)
    except VaultError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)

    if result.reset_vault:
        print_success("Vault reset. All stored passwords were removed.")
    elif result.already_initialized:
        print_info("Vault already initialized. Existing passwords were kept.")
    else:
        print_success("Vault initialized successfully!")
    console.print(f"[dim]Location: {escape(str(result.vault_dir))}[/dim]")


@app.command()
def add(
    name: Annotated[
        str,
        typer.Option(
            "--name",
            "-n",
            help="Name of the password entry.",
        ),
    ],
    password: Annotated[
        str | None,
        typer.Option(
            "--password",
            "-p",
            help="Password to store. A random one is generated when omitted.",
        ),
    ] = None,
    length: Annotated[
        int | None,
        typer.Option(
            "--length",
            "-l",
            help="Length of the generated password (default 12).",
        ),
    ] = None,
    use_symbols: Annotated[
        bool | None,
        typer.Option(
            "--use-symbols/--no-use-symbols",
            "-u",
            help="Use symbols in the generated password (default from config).",
        ),
    ] = None,
) -> None:
    """Add a new password to the vault."""
    if password is not None and length is not None:
        print_error("Cannot specify both --password and --length.")
        raise typer.Exit(1)
    if password is not None and use_symbols is not None:
        print_error("Cannot specify both --password and --use-symbols.")
        raise typer.Exit(1)

    store = _open_store()

    if password is None:
        try:
            defaults = get_config().generator
            password = generate_password(
                length=length if length is not None else defaults.default_length,
                use_symbols=use_symbols if use_symbols is not None else defaults.use_symbols,
            )
        except (ConfigurationError, GenerationError) as e:
            print_error(escape(str(e)))
            raise typer.Exit(1)

    try:
        stored = store.add(name, password)
    except VaultError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)

    print_success(f"Password added for {escape(name)}")
    _copy_to_clipboard(stored)
    print_success("Password copied to clipboard.")


@app.command()
def get(
    name: Annotated[
        str,
        typer.Option(
            "--name",
            "-n",
            help="Name of the password entry to retrieve.",
        ),
    ],
    reveal: Annotated[
        bool,
        typer.Option(
            "--reveal",
            "-r",
            help="Print the password in plaintext.",
        ),
    ] = False,
) -> None:
    """Retrieve a password from the vault."""
    store = _open_store()

    try:
        entry = store.find(name)
    except VaultError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)

    if entry is None:
        print_warning(f"No password found for '{escape(name)}'")
        return

    if reveal:
        print_plain(entry.password)

    _copy_to_clipboard(entry.password)
    print_success("Password copied to clipboard.")


@app.command("list")
def list_passwords() -> None:
    """List all passwords in the vault."""
    store = _open_store()

    try:
        names = store.list()
    except VaultError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)

    if not names:
        print_info("No passwords stored.")
        return

    console.print("[bold]Stored passwords:[/bold]")
    for entry_name in names:
        print_plain(f"- {entry_name}")


@app.command()
def delete(
    name: Annotated[
        str,
        typer.Option(
            "--name",
            "-n",
            help="Name of the password entry to delete.",
        ),
    ],
) -> None:
    """Delete a password from the vault."""
    store = _open_store()

    try:
        deleted = store.delete(name)
    except VaultError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)

    if deleted:
        print_success(f"Password entry for '{escape(name)}' deleted.")
    else:
        print_warning(f"No password found for '{escape(name)}'")


if __name__ == "__main__":
    app()
