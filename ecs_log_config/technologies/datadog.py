#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Datadog APM: only keeps the tracer records, which are already JSON and handled by the default parsers.
"""

from ecs_log_config.filters import CONTAINER_MATCH

from .technology import Technology

DATADOG = Technology(
    "datadog",
    filters=[
        {
            "name": "grep",
            "match": CONTAINER_MATCH,
            "regex": "log Luscii APM",
        },
        {
            "name": "modify",
            "match": CONTAINER_MATCH,
            "add_fields": {"log_source": "datadog"},
        },
    ],
)
