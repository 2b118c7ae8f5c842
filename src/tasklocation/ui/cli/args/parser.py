"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from tasklocation.config.config import Config
from tasklocation.features.location import StorageType, UnknownStorageTypeError
from tasklocation.platform.logging import default_log_file, logger, setup_logger
from tasklocation.ui.cli.args.options import CLIArgs, DecodeArgs, EncodeArgs, StorageTypesArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        common = argparse.ArgumentParser(add_help=False)
        verbosity = common.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors and results",
        )

        parser = argparse.ArgumentParser(
            prog="tasklocation",
            description="Inspect and build preferred task location tokens.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        subparsers = parser.add_subparsers(dest="command", required=True)

        decode_parser = subparsers.add_parser(
            "decode",
            parents=[common],
            help="Decode location tokens and show their fields",
        )
        _ = decode_parser.add_argument(
            "tokens",
            nargs="+",
            metavar="TOKEN",
            help="Location token, e.g. executor_host1_7 or hdfs_cache_host2",
        )
        _ = decode_parser.add_argument(
            "--strict",
            action="store_true",
            help="Reject tokens that decode to an empty host",
        )

        encode_parser = subparsers.add_parser(
            "encode",
            parents=[common],
            help="Build a location and print its token",
        )
        _ = encode_parser.add_argument("--host", required=True, help="Host name")
        target = encode_parser.add_mutually_exclusive_group()
        _ = target.add_argument(
            "--executor-id",
            metavar="ID",
            help="Prefer a specific executor on the host",
        )
        _ = target.add_argument(
            "--storage-type",
            metavar="TYPE",
            help="Storage medium backing the host (case-insensitive)",
        )
        _ = encode_parser.add_argument(
            "--hdfs-cache",
            action="store_true",
            help="Mark the host as holding an HDFS cached copy",
        )

        _ = subparsers.add_parser(
            "storage-types",
            parents=[common],
            help="List known storage types",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments and configure logging.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If arguments are invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(parsed_args.quiet)
        is_verbose = bool(parsed_args.verbose)
        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or default_log_file()
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "decode":
            return DecodeArgs(
                command="decode",
                tokens=list(parsed_args.tokens),
                strict=bool(parsed_args.strict) or configuration.strict_hosts,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "encode":
            return ArgumentParser._process_encode(parser, parsed_args, is_verbose, is_quiet)

        if command == "storage-types":
            return StorageTypesArgs(command="storage-types", verbose=is_verbose, quiet=is_quiet)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_encode(
        parser: argparse.ArgumentParser,
        parsed_args: argparse.Namespace,
        is_verbose: bool,
        is_quiet: bool,
    ) -> EncodeArgs:
        """Validate ``encode`` options that argparse cannot express."""

        executor_id: str | None = parsed_args.executor_id
        if parsed_args.hdfs_cache and executor_id is not None:
            parser.error("--hdfs-cache cannot be combined with --executor-id")

        storage_type: StorageType | None = None
        if parsed_args.storage_type is not None:
            try:
                storage_type = StorageType.parse(parsed_args.storage_type)
            except UnknownStorageTypeError as e:
                parser.error(str(e))

        return EncodeArgs(
            command="encode",
            host=parsed_args.host,
            executor_id=executor_id,
            storage_type=storage_type,
            hdfs_cache=bool(parsed_args.hdfs_cache),
            verbose=is_verbose,
            quiet=is_quiet,
        )
