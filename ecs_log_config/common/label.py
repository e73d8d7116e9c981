#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Naming label for the log configuration, from its name and the usual label context
(namespace, tenant, environment, stage, attributes).
"""

from __future__ import annotations

from copy import deepcopy

from compose_x_common.compose_x_common import keyisset, set_else_none

from ecs_log_config.common import LABEL_INVALID_CHARS


class LogLabel:
    default_delimiter = "-"
    default_label_order = [
        "namespace",
        "tenant",
        "environment",
        "stage",
        "name",
        "attributes",
    ]

    def __init__(self, name: str, context: dict = None):
        self.name = name
        self.context = deepcopy(context) if context else {}
        self.delimiter = set_else_none(
            "delimiter", self.context, alt_value=self.default_delimiter
        )
        self.label_order = set_else_none(
            "label_order", self.context, alt_value=self.default_label_order
        )

    def __repr__(self):
        return self.id

    def normalize(self, value: str) -> str:
        return LABEL_INVALID_CHARS.sub("", value).lower()

    @property
    def parts(self) -> list[str]:
        parts: list = []
        for label in self.label_order:
            if label == "name":
                value = self.name
            else:
                value = set_else_none(label, self.context)
            if isinstance(value, list):
                parts += [self.normalize(_value) for _value in value if _value]
            elif value:
                parts.append(self.normalize(value))
        return [part for part in parts if part]

    @property
    def id(self) -> str:
        return self.delimiter.join(self.parts)

    @property
    def tags(self) -> dict:
        tags: dict = {}
        if keyisset("tags", self.context):
            tags.update(self.context["tags"])
        tags["Name"] = self.id
        return tags
