#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

from ecs_log_config.filters import CONTAINER_MATCH

from .technology import Technology

NGINX = Technology(
    "nginx",
    parsers=[
        {
            "name": "nginx_json",
            "format": "json",
            "time_key": "time_local",
            "time_format": "%d/%b/%Y:%H:%M:%S %z",
            "time_keep": True,
        },
        {
            "name": "nginx_access",
            "format": "regex",
            "regex": r'^(?<remote>[^ ]*) (?<host>[^ ]*) (?<user>[^ ]*) \[(?<time>[^\]]*)\] "(?<method>\S+)(?: +(?<path>[^\"]*?)(?: +\S*)?)?" (?<code>[^ ]*) (?<size>[^ ]*)(?: "(?<referer>[^\"]*)" "(?<agent>[^\"]*)")',
            "time_key": "time",
            "time_format": "%d/%b/%Y:%H:%M:%S %z",
            "types": "code:integer size:integer",
        },
        {
            "name": "nginx_error",
            "format": "regex",
            "regex": r"^(?<time>\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2}) \[(?<level>\w+)\] (?<pid>\d+)#(?<tid>\d+): (?<message>.*)$",
            "time_key": "time",
            "time_format": "%Y/%m/%d %H:%M:%S",
            "types": "pid:integer tid:integer",
        },
    ],
    filters=[
        {
            "name": "modify",
            "match": CONTAINER_MATCH,
            "add_fields": {"log_source": "nginx"},
        },
    ],
)
