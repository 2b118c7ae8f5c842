"""Command line argument handling package."""

from tasklocation.ui.cli.args.parser import ArgumentParser
from tasklocation.ui.cli.args.options import CLIArgs, DecodeArgs, EncodeArgs, StorageTypesArgs

__all__ = ["ArgumentParser", "CLIArgs", "DecodeArgs", "EncodeArgs", "StorageTypesArgs"]
