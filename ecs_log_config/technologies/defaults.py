#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
JSON parsers for the most common timestamp fields, always part of the parsers.
"""

from ecs_log_config.parsers import parser_from_definition

DEFAULT_PARSERS_DEFINITIONS: list = [
    {
        "name": "json_time",
        "format": "json",
        "time_key": "time",
        "time_format": "%Y-%m-%dT%H:%M:%S.%L%z",
        "time_keep": True,
    },
    {
        "name": "json_datetime",
        "format": "json",
        "time_key": "datetime",
        "time_format": "%Y-%m-%dT%H:%M:%S%z",
        "time_keep": True,
    },
    {
        "name": "json_time_local",
        "format": "json",
        "time_key": "time_local",
        "time_format": "%d/%b/%Y:%H:%M:%S %z",
        "time_keep": True,
    },
]

DEFAULT_PARSERS: tuple = tuple(
    parser_from_definition(_definition) for _definition in DEFAULT_PARSERS_DEFINITIONS
)
