#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Public interface: validates the inputs and exposes the two outputs,
``log_config_parsers`` and ``log_config_filters``, for the container definitions to use.
"""

from __future__ import annotations

from copy import deepcopy

from compose_x_common.compose_x_common import set_else_none

from ecs_log_config.aggregator import compose_filters, compose_parsers
from ecs_log_config.common.label import LogLabel
from ecs_log_config.common.logging import LOG
from ecs_log_config.filters import FilterRecord, filter_from_definition
from ecs_log_config.log_sources import LogSource
from ecs_log_config.parsers import ParserRecord, parser_from_definition
from ecs_log_config.technologies import get_technology


def validate_log_sources(log_sources: list) -> list[LogSource]:
    """
    Turns the log_sources definitions into LogSource and checks all technologies exist.

    :raises UnknownTechnology: on the first log source without technology table
    """
    sources = [
        _source
        if isinstance(_source, LogSource)
        else LogSource.from_definition(_source)
        for _source in log_sources
    ]
    for log_source in sources:
        get_technology(log_source.name)
    return sources


class LogConfig:
    """
    Parsers & filters for the given log sources, custom parsers and custom filters.
    Everything is evaluated at init, so an invalid input never gives a partial result.

    :ivar LogLabel label: naming label from name and context
    :ivar list[LogSource] log_sources:
    :ivar list[ParserRecord] custom_parsers:
    :ivar list[FilterRecord] custom_filters:
    """

    def __init__(
        self,
        name: str,
        context: dict = None,
        log_sources: list = None,
        custom_parsers: list = None,
        custom_filters: list = None,
    ):
        if not name or not isinstance(name, str):
            raise ValueError("name must be a non-empty string. Got", name)
        self.label = LogLabel(name, context)
        self.log_sources = validate_log_sources(log_sources or [])
        self.custom_parsers = [
            parser_from_definition(_parser) for _parser in (custom_parsers or [])
        ]
        self.custom_filters = [
            filter_from_definition(_filter) for _filter in (custom_filters or [])
        ]
        self._parsers = compose_parsers(self.log_sources, self.custom_parsers)
        self._filters = compose_filters(self.log_sources, self.custom_filters)
        LOG.debug(
            f"{self.label.id} - {len(self._parsers)} parsers,"
            f" {len(self._filters)} filters for log sources {self.log_sources}"
        )

    @classmethod
    def from_definition(cls, definition: dict) -> LogConfig:
        """
        :param dict definition: input definition, as loaded from the input files
        """
        return cls(
            set_else_none("name", definition),
            context=set_else_none("context", definition),
            log_sources=set_else_none("log_sources", definition, alt_value=[]),
            custom_parsers=set_else_none("custom_parsers", definition, alt_value=[]),
            custom_filters=set_else_none("custom_filters", definition, alt_value=[]),
        )

    @property
    def name(self) -> str:
        return self.label.name

    @property
    def parsers(self) -> list[ParserRecord]:
        return list(self._parsers)

    @property
    def filters(self) -> list[FilterRecord]:
        return list(self._filters)

    @property
    def log_config_parsers(self) -> list[dict]:
        return [_parser.to_dict() for _parser in self._parsers]

    @property
    def log_config_filters(self) -> list[dict]:
        return [_filter.to_dict() for _filter in self._filters]

    @property
    def outputs(self) -> dict:
        return deepcopy(
            {
                "log_config_parsers": self.log_config_parsers,
                "log_config_filters": self.log_config_filters,
            }
        )
