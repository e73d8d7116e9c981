#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

from __future__ import annotations

from compose_x_common.compose_x_common import set_else_none

from ecs_log_config.filters import ALL_CONTAINERS, CONTAINER_MATCH, container_match
from ecs_log_config.technologies import Technology, get_technology


class LogSource:
    """
    A technology whose logs come from a given container. ``*`` stands for all containers.

    :ivar str name: the technology key
    :ivar str container: the container name
    """

    def __init__(self, name: str, container: str = None):
        self.name = name
        self.container = container if container else ALL_CONTAINERS

    @classmethod
    def from_definition(cls, definition: dict) -> LogSource:
        if not isinstance(definition, dict):
            raise TypeError("log_sources items must be", dict, "Got", type(definition))
        return cls(
            set_else_none("name", definition, alt_value=""),
            set_else_none("container", definition),
        )

    def __repr__(self):
        return f"{self.name}::{self.container}"

    def __eq__(self, other):
        return (
            isinstance(other, LogSource)
            and self.name == other.name
            and self.container == other.container
        )

    def __hash__(self):
        return hash((self.name, self.container))

    @property
    def technology(self) -> Technology:
        return get_technology(self.name)

    @property
    def match(self) -> str:
        """
        The match pattern the technology filters get for this source
        """
        return container_match(CONTAINER_MATCH, self.container)
