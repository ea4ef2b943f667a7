"""Command-line entry point for gwt"""

import sys

from gwt.cli.args import parse_args
from gwt.cli.commands import Command, resolve_command, usage_text
from gwt.config import Config
from gwt.core import WorktreeManager
from gwt.exceptions import GwtError, UsageError
from gwt.services.display_service import DisplayService
from gwt.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

_HANDLERS = {
    Command.ADD: lambda manager, context, name: manager.add(context, name),
    Command.LIST: lambda manager, context, name: manager.list_worktrees(context),
    Command.SWITCH: lambda manager, context, name: manager.switch(context, name),
    Command.REMOVE: lambda manager, context, name: manager.remove(context, name),
    Command.CLEANUP: lambda manager, context, name: manager.cleanup(),
}


def main(argv=None) -> int:
    """Main entry point for the application. Returns the process exit status."""
    parsed_args = parse_args(argv)
    display = DisplayService()
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    if parsed_args.command is None:
        display.show_usage(usage_text(), to_stderr=False)
        return 1

    command = resolve_command(parsed_args.command)
    if command is None:
        display.show_error(f"unknown command '{parsed_args.command}'")
        display.show_usage(usage_text())
        return 1

    if command.requires_name and not parsed_args.name:
        display.show_error(f"{command.command_name} requires a worktree name")
        display.show_usage(usage_text())
        return 1

    try:
        config = Config(verbose=parsed_args.verbose, debug=parsed_args.debug)
        manager = WorktreeManager.from_cwd(config, display=display)
        context = manager.resolve_context()
        logger.debug(f"Running {command.command_name} {parsed_args.name}".rstrip())
        _HANDLERS[command](manager, context, parsed_args.name)
        return 0
    except KeyboardInterrupt:
        display.show_warning("Operation cancelled by user")
        return 1
    except UsageError as e:
        display.show_error(str(e))
        display.show_usage(usage_text())
        return 1
    except GwtError as e:
        display.show_error(str(e))
        return 1
    except Exception as e:
        display.show_error(str(e))
        if parsed_args.debug:
            display.err.print_exception()
        return 1


def main_entry() -> None:
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
