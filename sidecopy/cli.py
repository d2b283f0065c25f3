"""Command line interface for sidecopy."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import load_config
from .index import IndexParseError, read_index
from .output import format_metadata, format_presence
from .services.config_service import apply_config_updates, get_config_snapshot
from .services.copy_service import CopyResult, copy_files, recopy_files, update_index
from .services.metadata_service import resolve_providers
from .services.session_service import (
    CopySession,
    DirectoryOutsideRootError,
    load_session,
    remember_session,
    resolve_target_directory,
)
from .text import Messages, Styles
from .utils import format_path, resolve_directory

console = Console()

app = typer.Typer(
    help=Messages.APP_HELP,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"sidecopy v{__version__}")
        raise typer.Exit()


def _parse_boolean(value: str) -> bool:
    token = value.strip().lower()
    if token in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if token in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(Messages.ERROR_BOOLEAN_INVALID.format(value=value))


def _prompt_directory(text: str, default: str) -> str:
    return typer.prompt(text, default=default)


def _resolve_target(session: CopySession, directory: Path | None) -> Path:
    try:
        return resolve_target_directory(session, directory, _prompt_directory)
    except DirectoryOutsideRootError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _fail(exc: Exception) -> typer.Exit:
    console.print(_styled(escape(str(exc)), Styles.ERROR))
    return typer.Exit(code=1)


def _providers_from_config(names: list[str]):
    try:
        return resolve_providers(names)
    except ValueError as exc:
        raise _fail(exc) from exc


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    )
) -> None:
    """Global Typer callback for shared options."""
    return None


@app.command(help=Messages.HELP_COPY)
def copy(
    files: list[Path] | None = typer.Argument(
        None,
        help=Messages.HELP_COPY_FILES,
    ),
    directory: Path | None = typer.Option(
        None,
        "--dir",
        "-d",
        help=Messages.HELP_DIR,
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help=Messages.HELP_FORCE,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help=Messages.HELP_VERBOSE,
    ),
) -> None:
    """Copy files into a directory and record their provenance."""
    if not files:
        return
    config = load_config()
    session = load_session()
    target = _resolve_target(session, directory)
    providers = _providers_from_config(config.providers)
    try:
        result = copy_files(
            files,
            target,
            providers=providers,
            skip_protected=config.skip_protected and not force,
            index_name=config.index_name,
        )
    except (ValueError, OSError) as exc:
        raise _fail(exc) from exc
    remember_session(session)
    _report_copy(result, verbose=verbose)


@app.command(help=Messages.HELP_RECOPY)
def recopy(
    directory: Path | None = typer.Option(
        None,
        "--dir",
        "-d",
        help=Messages.HELP_DIR,
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help=Messages.HELP_FORCE,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help=Messages.HELP_VERBOSE,
    ),
) -> None:
    """Refresh every copy listed in the sidecar index."""
    config = load_config()
    session = load_session()
    target = _resolve_target(session, directory)
    providers = _providers_from_config(config.providers)
    try:
        target = resolve_directory(target)
        result = recopy_files(
            target,
            providers=providers,
            skip_protected=config.skip_protected and not force,
            index_name=config.index_name,
        )
    except (ValueError, OSError) as exc:
        raise _fail(exc) from exc
    remember_session(session)
    _report_copy(result, verbose=verbose)


@app.command(help=Messages.HELP_UPDATE)
def update(
    directory: Path | None = typer.Option(
        None,
        "--dir",
        "-d",
        help=Messages.HELP_DIR,
    ),
) -> None:
    """Prune index entries whose copies were removed."""
    config = load_config()
    session = load_session()
    target = _resolve_target(session, directory)
    try:
        target = resolve_directory(target)
        result = update_index(target, index_name=config.index_name)
    except (IndexParseError, OSError) as exc:
        raise _fail(exc) from exc
    remember_session(session)

    if result.index_path is None:
        console.print(_styled(Messages.INFO_INDEX_MISSING.format(path=target), Styles.INFO))
        return
    if result.removed:
        count = len(result.removed)
        plural = "ies" if count > 1 else "y"
        console.print(
            _styled(
                Messages.INFO_INDEX_PRUNED.format(
                    count=count,
                    plural=plural,
                    path=result.index_path,
                ),
                Styles.SUCCESS,
            )
        )
        return
    console.print(_styled(Messages.INFO_INDEX_CLEAN.format(path=target), Styles.INFO))


@app.command(help=Messages.HELP_SHOW)
def show(
    directory: Path | None = typer.Option(
        None,
        "--dir",
        "-d",
        help=Messages.HELP_DIR,
    ),
) -> None:
    """Render the sidecar index of a directory as a table."""
    config = load_config()
    session = load_session()
    target = _resolve_target(session, directory)
    try:
        target = resolve_directory(target)
        entries = read_index(target, config.index_name)
    except (IndexParseError, OSError) as exc:
        raise _fail(exc) from exc
    remember_session(session)

    if not entries:
        console.print(_styled(Messages.INFO_INDEX_EMPTY, Styles.INFO))
        return
    table = Table(
        title=Messages.TABLE_TITLE.format(path=target),
        header_style=Styles.TABLE_HEADER,
    )
    table.add_column(Messages.TABLE_HEADER_INDEX, justify="right")
    table.add_column(Messages.TABLE_HEADER_FILE, overflow="fold")
    table.add_column(Messages.TABLE_HEADER_SOURCE, overflow="fold")
    table.add_column(Messages.TABLE_HEADER_METADATA, overflow="fold")
    table.add_column(Messages.TABLE_HEADER_PRESENT, justify="center")
    for idx, entry in enumerate(entries, start=1):
        present = (target / entry.name).is_file()
        table.add_row(
            str(idx),
            escape(entry.name),
            escape(entry.source),
            format_metadata(entry.metadata),
            format_presence(present, console),
        )
    console.print(table)


@app.command(help=Messages.HELP_CONFIG)
def config(
    show_config: bool = typer.Option(
        False,
        "--show",
        help=Messages.HELP_SHOW_CONFIG,
    ),
    set_root_option: Path | None = typer.Option(
        None,
        "--set-root",
        help=Messages.HELP_SET_ROOT,
    ),
    clear_root: bool = typer.Option(
        False,
        "--clear-root",
        help=Messages.HELP_CLEAR_ROOT,
    ),
    set_index_name_option: str | None = typer.Option(
        None,
        "--set-index-name",
        help=Messages.HELP_SET_INDEX_NAME,
    ),
    set_skip_protected_option: str | None = typer.Option(
        None,
        "--set-skip-protected",
        help=Messages.HELP_SET_SKIP_PROTECTED,
    ),
    set_providers_option: str | None = typer.Option(
        None,
        "--set-providers",
        help=Messages.HELP_SET_PROVIDERS,
    ),
    clear_last_directory: bool = typer.Option(
        False,
        "--clear-last-directory",
        help=Messages.HELP_CLEAR_LAST_DIRECTORY,
    ),
) -> None:
    """Manage settings stored in ~/.sidecopy/config.json."""
    skip_protected: bool | None = None
    if set_skip_protected_option is not None:
        try:
            skip_protected = _parse_boolean(set_skip_protected_option)
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc

    try:
        updates = apply_config_updates(
            root=set_root_option,
            clear_root=clear_root,
            index_name=set_index_name_option,
            skip_protected=skip_protected,
            providers=set_providers_option,
            clear_last_directory=clear_last_directory,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    snapshot = get_config_snapshot()
    if updates.root_set:
        console.print(_styled(Messages.INFO_ROOT_SET.format(value=snapshot.root), Styles.SUCCESS))
    if updates.root_cleared:
        console.print(_styled(Messages.INFO_ROOT_CLEARED, Styles.SUCCESS))
    if updates.index_name_set:
        console.print(
            _styled(Messages.INFO_INDEX_NAME_SET.format(value=snapshot.index_name), Styles.SUCCESS)
        )
    if updates.skip_protected_set:
        console.print(
            _styled(
                Messages.INFO_SKIP_PROTECTED_SET.format(
                    value="yes" if snapshot.skip_protected else "no"
                ),
                Styles.SUCCESS,
            )
        )
    if updates.providers_set:
        console.print(
            _styled(
                Messages.INFO_PROVIDERS_SET.format(value=", ".join(snapshot.providers)),
                Styles.SUCCESS,
            )
        )
    if updates.last_directory_cleared:
        console.print(_styled(Messages.INFO_LAST_DIRECTORY_CLEARED, Styles.SUCCESS))

    if show_config or not updates.changed:
        console.print(
            _styled(
                Messages.INFO_CONFIG_SUMMARY.format(
                    index_name=snapshot.index_name,
                    skip_protected="yes" if snapshot.skip_protected else "no",
                    providers=", ".join(snapshot.providers),
                    root=snapshot.root or "-",
                    last_directory=snapshot.last_directory or "-",
                ),
                Styles.INFO,
            )
        )


def _report_copy(result: CopyResult, *, verbose: bool) -> None:
    for skipped in result.skipped:
        console.print(
            _styled(Messages.WARNING_PROTECTED_SKIPPED.format(path=skipped), Styles.WARNING)
        )
    if not result.copied:
        console.print(
            _styled(Messages.INFO_NOTHING_TO_COPY.format(path=result.directory), Styles.INFO)
        )
        console.print(
            _styled(Messages.INFO_INDEX_UNCHANGED.format(path=result.directory), Styles.INFO)
        )
        return
    if verbose:
        for item in result.copied:
            console.print(
                Messages.INFO_COPIED_FILE.format(
                    source=escape(str(item.source)),
                    destination=format_path(item.destination, result.directory),
                    metadata=format_metadata(item.metadata),
                )
            )
    plural = "s" if result.count != 1 else ""
    console.print(
        _styled(
            Messages.INFO_COPIED.format(count=result.count, plural=plural, path=result.directory),
            Styles.SUCCESS,
        )
    )
    if result.index_path is not None:
        console.print(
            _styled(Messages.INFO_INDEX_WRITTEN.format(path=result.index_path), Styles.INFO)
        )


def _styled(text: str, style: str) -> str:
    return f"[{style}]{text}[/{style}]"


def run(argv: list[str] | None = None) -> None:
    """Entry point wrapper allowing optional argument override."""
    if argv is None:
        app()
    else:
        app(args=list(argv))
