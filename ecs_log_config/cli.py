#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Console script for ecs_log_config.
"""

import argparse
import sys

from jsonschema.exceptions import ValidationError
from yaml import YAMLError

from ecs_log_config import __version__
from ecs_log_config.common.files import FileArtifact
from ecs_log_config.common.logging import LOG, log_to_stderr, set_log_level
from ecs_log_config.common.settings import LogConfigSettings
from ecs_log_config.exceptions import LogConfigException
from ecs_log_config.log_config import LogConfig
from ecs_log_config.rendering import render_filters_config, render_parsers_config
from ecs_log_config.technologies import TECHNOLOGIES


class ArgparseHelper(argparse._HelpAction):
    """
    Used to help print top level '--help' arguments from argparse
    when used with subparsers
    """

    def __call__(self, parser, namespace, values, option_string=None):
        parser.print_help()
        print()
        subparsers_actions = [
            action
            for action in parser._actions
            if isinstance(action, argparse._SubParsersAction)
        ]
        for subparsers_action in subparsers_actions:
            for choice, subparser in list(subparsers_action.choices.items()):
                if choice in [cmd["name"] for cmd in LogConfigSettings.active_commands]:
                    print(f"Command '{choice}'")
                    print(subparser.format_usage())
        parser.exit()


def main_parser():
    """
    Console script for ecs_log_config.
    """
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "-h",
        "--help",
        action=ArgparseHelper,
        help="show this help message and exit",
    )
    parser.add_argument(
        "--loglevel",
        type=str,
        help="Log level. Defaults to INFO",
        required=False,
        dest=LogConfigSettings.loglevel_arg,
    )
    cmd_parsers = parser.add_subparsers(
        dest=LogConfigSettings.command_arg, help="Command to execute."
    )
    files_parser = argparse.ArgumentParser(add_help=False)
    files_parser.add_argument(
        "-f",
        "--input-file",
        dest=LogConfigSettings.input_file_arg,
        required=True,
        help="Path to the log config input file. Repeat to merge several files in order",
        action="append",
    )
    files_parser.add_argument(
        "-n",
        "--name",
        help="Overrides the name set in the input files",
        required=False,
        type=str,
        dest=LogConfigSettings.name_arg,
    )
    render_parser = argparse.ArgumentParser(add_help=False)
    render_parser.add_argument(
        "--format",
        help="Defines the output format.",
        type=str,
        dest=LogConfigSettings.format_arg,
        choices=LogConfigSettings.allowed_formats,
        default=LogConfigSettings.default_format,
    )
    render_parser.add_argument(
        "-d",
        "--output-dir",
        required=False,
        help="Output directory to write the files to. Prints to stdout if not set",
        type=str,
        dest=LogConfigSettings.output_dir_arg,
    )
    cmd_parsers.add_parser(
        name=LogConfigSettings.render_arg,
        help=LogConfigSettings.active_commands[0]["help"],
        parents=[files_parser, render_parser],
    )
    cmd_parsers.add_parser(
        name=LogConfigSettings.validate_arg,
        help=LogConfigSettings.active_commands[1]["help"],
        parents=[files_parser],
    )
    for command in LogConfigSettings.neutral_commands:
        cmd_parsers.add_parser(name=command["name"], help=command["help"])
    return parser


def define_artifacts(log_config: LogConfig, output_format: str) -> list:
    """
    Files to output for the log config in the given format
    """
    if output_format == "fluentbit":
        header = f"{log_config.label.id} - generated by ecs-log-config {__version__}"
        return [
            FileArtifact(
                "parsers.conf",
                body=render_parsers_config(log_config.parsers, header=header),
            ),
            FileArtifact(
                "filters.conf",
                body=render_filters_config(
                    log_config.filters, log_config.parsers, header=header
                ),
            ),
        ]
    file_extension = "yaml" if output_format == "yaml" else "json"
    return [FileArtifact(f"log_config.{file_extension}", content=log_config.outputs)]


def list_technologies() -> None:
    for name, technology in TECHNOLOGIES.items():
        parsers = ", ".join(technology.parsers_names) if technology.parsers else "-"
        print(f"{name}: {parsers}")


def main(args: list = None) -> int:
    """
    Main entry point for CLI
    :return: status code
    """
    parser = main_parser()
    if args is None:
        args = sys.argv[1:]
    if not args:
        parser.print_help()
        return 0
    options = parser.parse_args(args)
    if options.loglevel:
        try:
            set_log_level(options.loglevel)
        except ValueError as error:
            print(error)
    command = getattr(options, LogConfigSettings.command_arg)
    if command == LogConfigSettings.version_arg:
        print(__version__)
        return 0
    elif command == LogConfigSettings.technologies_arg:
        list_technologies()
        return 0
    elif command is None:
        parser.print_help()
        return 0
    if command == LogConfigSettings.render_arg and not getattr(
        options, LogConfigSettings.output_dir_arg, None
    ):
        log_to_stderr()
    LOG.debug(options)
    try:
        settings = LogConfigSettings(**vars(options))
        LOG.debug(settings)
        log_config = LogConfig.from_definition(settings.content)
    except (LogConfigException, ValidationError) as error:
        LOG.error(error)
        return 1
    except (OSError, TypeError, YAMLError) as error:
        LOG.error(f"Failed to load input files - {error}")
        return 1
    if settings.command == LogConfigSettings.validate_arg:
        LOG.info(f"{log_config.label.id} - log config is valid")
        return 0
    for artifact in define_artifacts(log_config, settings.format):
        if settings.output_dir:
            artifact.write(settings.output_dir)
        else:
            print(artifact.body)
    return 0


if __name__ == "__main__":
    sys.exit(main())  # pragma: no cover
