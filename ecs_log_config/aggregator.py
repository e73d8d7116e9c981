#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Composes the final parsers and filters from the technologies tables of the log sources
and the custom parsers/filters.

Parsers = default parsers, then one block per technology in order of first appearance,
then the custom parsers.
Filters = one block per log source, set for its container, then the custom filters.
"""

from __future__ import annotations

from ecs_log_config.common.logging import LOG
from ecs_log_config.exceptions import DuplicateParserName
from ecs_log_config.filters import FilterRecord
from ecs_log_config.log_sources import LogSource
from ecs_log_config.parsers import ParserRecord
from ecs_log_config.technologies import DEFAULT_PARSERS, Technology


def unique_log_sources(log_sources: list[LogSource]) -> list[LogSource]:
    """
    Removes repeated (technology, container) log sources, keeping the first one.
    """
    sources: list = []
    for log_source in log_sources:
        if log_source in sources:
            LOG.warning(f"Log source {log_source} is defined more than once. Ignoring")
            continue
        sources.append(log_source)
    return sources


def distinct_technologies(log_sources: list[LogSource]) -> list[Technology]:
    technologies: list = []
    for log_source in log_sources:
        technology = log_source.technology
        if technology not in technologies:
            technologies.append(technology)
    return technologies


def check_unique_parser_names(parsers: list[ParserRecord]) -> None:
    """
    :raises DuplicateParserName: on the first parser which name was already used
    """
    names: set = set()
    for parser in parsers:
        if parser.name in names:
            LOG.error(f"Parser {parser.name} - name is already used by another parser")
            raise DuplicateParserName(parser.name)
        names.add(parser.name)


def compose_parsers(
    log_sources: list[LogSource], custom_parsers: list[ParserRecord] = None
) -> list[ParserRecord]:
    parsers: list = list(DEFAULT_PARSERS)
    for technology in distinct_technologies(log_sources):
        LOG.debug(f"{technology.name} - adding parsers {technology.parsers_names}")
        parsers += technology.parsers
    if custom_parsers:
        parsers += custom_parsers
    check_unique_parser_names(parsers)
    return parsers


def compose_filters(
    log_sources: list[LogSource], custom_filters: list[FilterRecord] = None
) -> list[FilterRecord]:
    filters: list = []
    for log_source in unique_log_sources(log_sources):
        technology = log_source.technology
        LOG.debug(f"{log_source} - adding filters matching {log_source.match}")
        filters += technology.filters_for(log_source.container)
    if custom_filters:
        filters += custom_filters
    return filters
