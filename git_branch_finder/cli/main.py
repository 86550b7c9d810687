"""Command-line entry point for git-branch-finder"""

import sys

from rich.console import Console

from git_branch_finder.cli.args import parse_args
from git_branch_finder.config import Config
from git_branch_finder.core import create_session
from git_branch_finder.exceptions import RepositoryAccessError
from git_branch_finder.logging_config import get_logger, setup_logging
from git_branch_finder.services.git import RepositoryGateway

console = Console()
error_console = Console(stderr=True)
logger = get_logger(__name__)


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)

    # The TUI owns the terminal, so logs only go to the log file
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug, tui_mode=True)

    try:
        config = Config(
            repo_path=parsed_args.repo,
            log_limit=parsed_args.log_limit,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )
    except ValueError as e:
        error_console.print(f"[red]Invalid configuration: {e}[/red]")
        return 1
    logger.debug(f"Configuration: {config.to_dict()}")

    try:
        with RepositoryGateway(config.repo_path) as gateway:
            machine = create_session(gateway, config)

            from git_branch_finder.tui import BranchFinderApp
            result = BranchFinderApp(machine).run()

        final = machine.snapshot()
        if final.finished and final.message:
            console.print(f"[green]{final.message}[/green]")

        return result if result is not None else machine.exit_code
    except RepositoryAccessError as e:
        logger.error(str(e))
        error_console.print(f"[red]Error: {e}[/red]")
        if parsed_args.debug:
            error_console.print_exception()
        return 1
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
