#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Renders the parsers and filters into Fluent Bit (classic mode) configuration files
"""

from __future__ import annotations

from os import path

from jinja2 import Environment, FileSystemLoader

from ecs_log_config.common.logging import LOG
from ecs_log_config.filters import FilterRecord, ParserFilter
from ecs_log_config.parsers import FilterBinding, ParserRecord

PARSERS_TEMPLATE = "parsers.conf.j2"
FILTERS_TEMPLATE = "filters.conf.j2"


def get_jinja_env() -> Environment:
    here = path.abspath(path.dirname(__file__))
    return Environment(
        loader=FileSystemLoader(here),
        autoescape=False,
        auto_reload=False,
        keep_trailing_newline=True,
    )


def binding_filter(parser: ParserRecord) -> ParserFilter:
    """
    The ``parser`` filter the parser binding stands for
    """
    binding: FilterBinding = parser.filter
    return ParserFilter(
        {
            "name": ParserFilter.name,
            "match": binding.match if binding.match else FilterBinding.default_match,
            "parser": parser.name,
            "key_name": binding.key_name
            if binding.key_name
            else FilterBinding.default_key_name,
            "reserve_data": binding.reserve_data,
            "preserve_key": binding.preserve_key,
            "unescape_key": binding.unescape_key,
        }
    )


def render_parsers_config(parsers: list[ParserRecord], header: str = None) -> str:
    template = get_jinja_env().get_template(PARSERS_TEMPLATE)
    content = template.render(
        header=header,
        sections=[_parser.fluentbit_properties() for _parser in parsers],
    )
    LOG.debug(content)
    return content


def render_filters_config(
    filters: list[FilterRecord], parsers: list[ParserRecord] = None, header: str = None
) -> str:
    """
    Parsers with a binding get their ``parser`` filter first, so the other filters
    work on the parsed records.
    """
    bindings = [
        binding_filter(_parser) for _parser in (parsers or []) if _parser.filter
    ]
    template = get_jinja_env().get_template(FILTERS_TEMPLATE)
    content = template.render(
        header=header,
        sections=[_filter.fluentbit_properties() for _filter in bindings + filters],
    )
    LOG.debug(content)
    return content
