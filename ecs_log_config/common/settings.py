#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Module for the LogConfigSettings class
"""

from __future__ import annotations

from os import path

import yaml
from compose_x_common.compose_x_common import keyisset, set_else_none
from jsonschema.exceptions import ValidationError

try:
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import SafeLoader as Loader

from ecs_log_config.common import merge_definitions
from ecs_log_config.common.logging import LOG
from ecs_log_config.specs import LOG_CONFIG_SPEC, validate_definition


def load_input_file(file_path: str) -> dict:
    """
    Loads a YAML or JSON input file

    :param str file_path:
    :rtype: dict
    """
    with open(path.abspath(file_path), encoding="utf-8") as input_fd:
        content = yaml.load(input_fd.read(), Loader=Loader)
    if not isinstance(content, dict):
        raise TypeError(
            f"{file_path} - content must be a mapping. Got", type(content)
        )
    return content


class LogConfigSettings:
    """
    Class to handle the settings to use for ECS Log Config.

    :ivar dict content: the merged input definition
    """

    name_arg = "Name"
    input_file_arg = "InputFiles"
    output_dir_arg = "OutputDirectory"
    format_arg = "OutputFormat"
    command_arg = "command"
    loglevel_arg = "loglevel"

    render_arg = "render"
    validate_arg = "validate"
    technologies_arg = "technologies"
    version_arg = "version"

    default_format = "json"
    allowed_formats = ["json", "yaml", "fluentbit"]

    active_commands = [
        {
            "name": render_arg,
            "help": "Generates the parsers & filters and writes them in the chosen format",
        },
        {
            "name": validate_arg,
            "help": "Validates the input files and that parsers & filters can be generated",
        },
    ]
    neutral_commands = [
        {
            "name": technologies_arg,
            "help": "Lists the supported technologies and their parsers",
        },
        {"name": version_arg, "help": "ECS Log Config Version"},
    ]

    def __init__(self, content: dict = None, **kwargs):
        self.command = set_else_none(self.command_arg, kwargs)
        self.input_files = set_else_none(self.input_file_arg, kwargs, alt_value=[])
        self.output_dir = set_else_none(self.output_dir_arg, kwargs)
        self.format = set_else_none(
            self.format_arg, kwargs, alt_value=self.default_format
        )
        if self.format not in self.allowed_formats:
            raise ValueError(
                f"Output format {self.format} is invalid. Must be one of",
                self.allowed_formats,
            )
        if content is None:
            content = self.load_input_files()
        if keyisset(self.name_arg, kwargs):
            content = merge_definitions(content, {"name": kwargs[self.name_arg]})
        self.content = content
        self.validate_content()

    def __repr__(self):
        return f"{self.command} {self.input_files} ({self.format})"

    def load_input_files(self) -> dict:
        """
        Loads all the input files and merges them in order
        """
        content: dict = {}
        for file_path in self.input_files:
            LOG.debug(f"Loading input file {file_path}")
            content = merge_definitions(content, load_input_file(file_path))
        return content

    def validate_content(self) -> None:
        try:
            validate_definition(self.content, LOG_CONFIG_SPEC)
        except ValidationError:
            LOG.error(f"{self.input_files} - Definition is not conform to schema.")
            raise
