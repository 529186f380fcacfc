"""Thin CLI wrapper — read-only inspection of the isolated settings store.

All storage access goes through the Container (bootstrap.py).
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from user_settings.application.persistence_helper import storage_file_name
from user_settings.presentation.cli.formatters import (
    console,
    entries_table,
    error_message,
    info_message,
    xml_panel,
)

app = typer.Typer(
    name="user-settings",
    help="🗂️  Inspect user settings persisted in isolated storage",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to a JSON storage configuration"),
]


def _container(config: Optional[Path]):
    from user_settings.bootstrap import Container

    return Container(config_path=config)


# ---------------------------------------------------------------------------
# user-settings path
# ---------------------------------------------------------------------------


@app.command()
def path(config: ConfigOption = None) -> None:
    """Print the directory backing the isolated store."""
    with _container(config).open_store() as store:
        console.print(str(store.root), soft_wrap=True)


# ---------------------------------------------------------------------------
# user-settings list
# ---------------------------------------------------------------------------


@app.command(name="list")
def list_entries(
    provider: Annotated[
        Optional[str], typer.Option("--provider", "-p", help="Only entries of this provider")
    ] = None,
    config: ConfigOption = None,
) -> None:
    """List stored setting sets."""
    pattern = f"{provider}_*.xml" if provider else "*.xml"
    with _container(config).open_store() as store:
        rows = []
        for name in store.list_files(pattern):
            stat = store.stat(name)
            rows.append((name, stat.st_size, stat.st_mtime))
        root = store.root

    if not rows:
        info_message(f"No settings stored in {root}")
        return
    entries_table(rows, title=str(root))


# ---------------------------------------------------------------------------
# user-settings show
# ---------------------------------------------------------------------------


@app.command()
def show(
    provider_id: Annotated[str, typer.Argument(help="Provider identifier")],
    name: Annotated[str, typer.Argument(help="Setting set name")],
    config: ConfigOption = None,
) -> None:
    """Show the XML stored for one setting set."""
    from user_settings.domain.errors import StorageError
    from user_settings.domain.models.enums import FileMode

    file_name = storage_file_name(provider_id, name)
    with _container(config).open_store() as store:
        try:
            exists = store.file_exists(file_name)
        except StorageError as exc:
            error_message(str(exc))
            raise typer.Exit(code=1)
        if not exists:
            error_message(f"No settings stored as {file_name}")
            raise typer.Exit(code=1)
        with store.open_file(file_name, FileMode.OPEN) as stream:
            raw = stream.read().decode("utf-8", errors="replace")

    xml_panel(raw, title=file_name)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
