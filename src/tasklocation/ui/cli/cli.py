"""Command line interface for tasklocation."""

import sys
from typing import final

from tasklocation.platform.logging import logger
from tasklocation.ui.cli.args import ArgumentParser
from tasklocation.ui.cli.args.options import CLIArgs, DecodeArgs, EncodeArgs
from tasklocation.ui.cli.commands import (
    Command,
    DecodeCommand,
    EncodeCommand,
    StorageTypesCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(args: CLIArgs) -> Command:
        if isinstance(args, DecodeArgs):
            return DecodeCommand(args)
        if isinstance(args, EncodeArgs):
            return EncodeCommand(args)
        return StorageTypesCommand()

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            if not CommandProcessor.build_command(args).execute():
                sys.exit(1)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except (OSError, ValueError) as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main(args_list: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside command processing.
    """
    CommandProcessor.process_command(args_list)
    return 0
