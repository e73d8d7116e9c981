#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
PHP: Monolog JSON formatter variants and the PHP error log
"""

from ecs_log_config.filters import CONTAINER_MATCH

from .technology import Technology

MONOLOG_TIME_KEY = "datetime"

PHP = Technology(
    "php",
    parsers=[
        {
            "name": "php_monolog_json_tz_colon",
            "format": "json",
            "time_key": MONOLOG_TIME_KEY,
            "time_format": "%Y-%m-%dT%H:%M:%S.%L%z",
            "time_keep": True,
        },
        {
            "name": "php_monolog_json_tz",
            "format": "json",
            "time_key": MONOLOG_TIME_KEY,
            "time_format": "%Y-%m-%dT%H:%M:%S%z",
            "time_keep": True,
        },
        {
            "name": "php_monolog_json_utc",
            "format": "json",
            "time_key": MONOLOG_TIME_KEY,
            "time_format": "%Y-%m-%dT%H:%M:%S.%LZ",
            "time_keep": True,
        },
        {
            "name": "php_monolog_json_micro",
            "format": "json",
            "time_key": MONOLOG_TIME_KEY,
            "time_format": "%Y-%m-%d %H:%M:%S.%L",
            "time_keep": True,
        },
        {
            "name": "php_error",
            "format": "regex",
            "regex": r"^\[(?<time>[^\]]+)\] PHP (?<level>[a-zA-Z ]+):\s+(?<message>.*)$",
            "time_key": "time",
            "time_format": "%d-%b-%Y %H:%M:%S %Z",
            "time_keep": True,
            "filter": {"key_name": "log", "reserve_data": True},
        },
    ],
    filters=[
        {
            "name": "grep",
            "match": CONTAINER_MATCH,
            "exclude": "log PHP Deprecated:",
        },
        {
            "name": "modify",
            "match": CONTAINER_MATCH,
            "add_fields": {"log_source": "php"},
        },
    ],
)
