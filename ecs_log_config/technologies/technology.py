#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Class to represent a technology parsers and filters table
"""

from __future__ import annotations

from ecs_log_config.filters import FilterRecord, filter_from_definition
from ecs_log_config.parsers import ParserRecord, parser_from_definition


class Technology:
    """
    A log producing application stack and the parsers/filters for its known log shapes.

    :ivar str name: the technology key log sources refer to
    """

    def __init__(self, name: str, parsers: list = None, filters: list = None):
        self.name = name
        self._parsers = tuple(
            parser_from_definition(_parser) for _parser in (parsers or [])
        )
        self._filters = tuple(
            filter_from_definition(_filter) for _filter in (filters or [])
        )

    def __repr__(self):
        return f"Technology({self.name})"

    @property
    def parsers(self) -> list[ParserRecord]:
        return list(self._parsers)

    @property
    def filters(self) -> list[FilterRecord]:
        """
        The filters with their match template, not set for any container
        """
        return list(self._filters)

    @property
    def parsers_names(self) -> list[str]:
        return [_parser.name for _parser in self._parsers]

    def filters_for(self, container: str) -> list[FilterRecord]:
        """
        Filters of the technology targeting the given container logs
        """
        return [_filter.for_container(container) for _filter in self._filters]
