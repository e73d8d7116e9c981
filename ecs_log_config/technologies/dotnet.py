#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
.NET: Serilog compact JSON (CLEF) and JSON console formatter
"""

from ecs_log_config.filters import CONTAINER_MATCH

from .technology import Technology

DOTNET = Technology(
    "dotnet",
    parsers=[
        {
            "name": "dotnet_json",
            "format": "json",
            "time_key": "@t",
            "time_format": "%Y-%m-%dT%H:%M:%S.%L%z",
            "time_keep": True,
        },
        {
            "name": "dotnet_json_timestamp",
            "format": "json",
            "time_key": "Timestamp",
            "time_format": "%Y-%m-%dT%H:%M:%S.%L%z",
            "time_keep": True,
        },
    ],
    filters=[
        {
            "name": "modify",
            "match": CONTAINER_MATCH,
            "rename_fields": {
                "@m": "message",
                "@mt": "message_template",
                "@l": "level",
                "@x": "exception",
            },
        },
        {
            "name": "nest",
            "match": CONTAINER_MATCH,
            "operation": "lift",
            "nested_under": "Properties",
            "add_prefix": "properties_",
        },
        {
            "name": "modify",
            "match": CONTAINER_MATCH,
            "add_fields": {"log_source": "dotnet"},
        },
    ],
)
