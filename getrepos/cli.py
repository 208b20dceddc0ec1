"""
get-repos CLI interface.

"The command line is where the real work happens. Everything else is just theater."
"""

from pathlib import Path

import typer
from dotenv import load_dotenv

from .config import load_config
from .errors import GetReposError, GitHubAPIError, PhaseError
from .mirror import BackupOrchestrator
from .models import BackupSummary
from .rich_utils import (
    console,
    print_error,
    print_header,
    print_key_value,
    print_success,
)

# Load environment variables from .env file if it exists
load_dotenv()

app = typer.Typer(
    name="get-repos",
    help="Clone and refresh every GitHub repository of an account into a backup directory.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from . import __version__
        console.print(f"get-repos version {__version__}")
        raise typer.Exit()


def print_summary(summary: BackupSummary) -> None:
    """Print the end-of-run summary."""
    console.print("\n" + "=" * 60)
    console.print("[bold]Summary[/bold]" + (" [yellow](dry run)[/yellow]" if summary.dry_run else ""))
    console.print("=" * 60)
    print_key_value("Local entries", summary.local_entries)
    print_key_value("Remote repositories", summary.discovered)
    print_key_value("To clone", summary.to_clone)
    print_key_value("Cloned", summary.cloned)
    print_key_value("Updated", summary.updated)
    console.print("=" * 60 + "\n")


@app.command()
def main(
    creds: Path = typer.Option(
        ...,
        "--creds",
        "-c",
        help="Credentials file (JSON or YAML) with token, types, org and backup-dir",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Preview clones and fetches without running git",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """
    Back up GitHub repositories.

    Lists the repositories of the configured account, clones the ones missing
    from the backup directory, then fetches every entry of that directory.

    Example:
        get-repos --creds ~/.config/get-repos/creds.json
        get-repos -c creds.yaml --dry-run
    """
    try:
        print_header(f"Loading Creds from {creds}")
        config = load_config(creds)
        config.dry_run = dry_run

        summary = BackupOrchestrator(config).run()
    except PhaseError as e:
        print_error(str(e))
        console.print(f"Number of repositories {'cloned' if e.phase == 'clone' else 'updated'}: {e.processed}")
        raise typer.Exit(code=e.exit_code)
    except GitHubAPIError as e:
        print_error(f"GitHub API Error: {e}")
        raise typer.Exit(code=e.exit_code)
    except GetReposError as e:
        print_error(str(e))
        raise typer.Exit(code=e.exit_code)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        raise typer.Exit(code=130)

    print_summary(summary)
    print_success("Backup complete")


if __name__ == "__main__":
    app()
