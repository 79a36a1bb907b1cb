# -------------------------------------------------------------------------------
# Copyright (c) 2026 ReqScan contributors
# All Rights Reserved.
#
# SPDX-License-Identifier: MIT
# -------------------------------------------------------------------------------

"""Contains the logic for all of the default options for ReqScan."""

import os
from typing import Any, Dict

import tomli

import reqscan
from reqscan.main.argument_parser import ArgumentParser

LOG = reqscan.get_logger(__name__)


class CommandlineSupport():
    CONFIG_FILE_NAME = ".reqscan.cfg"
    CONFIG_SECTION = "reqscan"

    # config file keys that differ from the option names
    CONFIG_KEY_ALIASES = {
        "input": "inputfile",
        "input-file": "inputfile",
        "output": "outputfile",
        "output-file": "outputfile",
        "exit-code": "ex",
    }

    def __init__(self) -> None:
        command_help = """Commands
    show                show the requirements of a requirements file
    lines               show the requirement lines as passed to the requirement parser
    clean               write a requirements file without comments and hashes

    Each command has its own help display, i.e. `reqscan show -h`."""
        self.parser = ArgumentParser(
            prog=reqscan.get_app_signature(),
            usage="reqscan command [options]",
            description="Requirements file scanner, version " + reqscan.get_app_version())
        self.parser.add_command_help(command_help)

        # store all positional argument in command
        self.parser.add_argument(
            "command",
            nargs="+",
            help="command to process")

        self.parser.add_argument(
            "-h",
            "--help",
            help="show a help message and exit",
            action="store_true",
        )

        self.register_options()

    def register_options(self) -> None:
        self.parser.add_argument(
            "-i",
            "--inputfile",
            dest="inputfile",
            help="requirements file to read from",
        )

        self.parser.add_argument(
            "-o",
            "--outputfile",
            dest="outputfile",
            help="output file to write to",
        )

        self.parser.add_argument(
            "-v",
            help="be verbose",
            dest="verbose",
            action="store_true",
        )

        self.parser.add_argument(
            "-ex",
            help="show exit code",
            action="store_true",
        )

        self.parser.add_argument(
            "-X",
            dest="debug",
            action="store_true",
            help="enable debug output")

    def read_config(self, filename: str = "", config_string: str = "") -> Dict[str, Any]:
        """
        Read configuration from string or config file.
        """
        try:
            if config_string:
                toml_dict = tomli.loads(config_string)
            elif filename:
                with open(filename, "rb") as f:
                    toml_dict = tomli.load(f)
            elif os.path.isfile(self.CONFIG_FILE_NAME):
                with open(self.CONFIG_FILE_NAME, "rb") as f:
                    toml_dict = tomli.load(f)
            else:
                return {}
        except tomli.TOMLDecodeError as tex:
            LOG.warning("Config file has invalid format: " + repr(tex))
            return {}
        except OSError as ex:
            LOG.warning("Error reading config file: " + repr(ex))
            return {}

        return toml_dict.get(self.CONFIG_SECTION, {})

    def update_args(self, args: Any, config: Dict[str, Any]) -> Any:
        """Use the config values for all options not given on the command line."""
        for key in config:
            args_key = self.CONFIG_KEY_ALIASES.get(key, key.replace("-", "_"))
            if args_key == "command":
                continue
            if hasattr(args, args_key) and not getattr(args, args_key):
                setattr(args, args_key, config[key])
            else:
                LOG.debug(f"Ignoring config setting {key}")

        return args

    def process_commandline(self, argv: Any) -> Any:
        """Reads the command line arguments"""
        args = self.parser.parse_args(argv)
        return self.update_args(args, self.read_config())
