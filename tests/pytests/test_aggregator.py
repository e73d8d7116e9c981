#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

from pytest import raises

from ecs_log_config.aggregator import (
    check_unique_parser_names,
    compose_filters,
    compose_parsers,
    distinct_technologies,
    unique_log_sources,
)
from ecs_log_config.exceptions import DuplicateParserName, UnknownTechnology
from ecs_log_config.filters import filter_from_definition
from ecs_log_config.log_sources import LogSource
from ecs_log_config.parsers import parser_from_definition
from ecs_log_config.technologies import get_technology

DEFAULTS = ["json_time", "json_datetime", "json_time_local"]


def test_log_source_defaults():
    source = LogSource.from_definition({"name": "php"})
    assert source.container == "*"
    assert source.match == "*"
    assert LogSource("php", "app").match == "*app*"
    assert LogSource("php", "app") == LogSource.from_definition(
        {"name": "php", "container": "app"}
    )


def test_log_source_technology():
    assert LogSource("php", "app").technology is get_technology("php")
    assert LogSource("nginx").technology.name == "nginx"
    with raises(UnknownTechnology):
        LogSource("java", "app").technology


def test_defaults_without_log_sources():
    assert [_parser.name for _parser in compose_parsers([])] == DEFAULTS
    assert compose_filters([]) == []


def test_parsers_once_per_technology():
    sources = [
        LogSource("php", "app"),
        LogSource("nginx", "web"),
        LogSource("php", "worker"),
    ]
    names = [_parser.name for _parser in compose_parsers(sources)]
    assert names == DEFAULTS + [
        "php_monolog_json_tz_colon",
        "php_monolog_json_tz",
        "php_monolog_json_utc",
        "php_monolog_json_micro",
        "php_error",
        "nginx_json",
        "nginx_access",
        "nginx_error",
    ]
    assert [_technology.name for _technology in distinct_technologies(sources)] == [
        "php",
        "nginx",
    ]


def test_filters_once_per_log_source():
    sources = [
        LogSource("php", "app"),
        LogSource("nginx", "web"),
        LogSource("php", "worker"),
    ]
    filters = compose_filters(sources)
    assert [(_filter.name, _filter.match) for _filter in filters] == [
        ("grep", "*app*"),
        ("modify", "*app*"),
        ("modify", "*web*"),
        ("grep", "*worker*"),
        ("modify", "*worker*"),
    ]


def test_repeated_log_sources_collapsed():
    sources = [LogSource("nginx", "web"), LogSource("nginx", "web")]
    assert unique_log_sources(sources) == [LogSource("nginx", "web")]
    assert len(compose_filters(sources)) == 1


def test_custom_records_appended_in_order():
    custom_parsers = [
        parser_from_definition({"name": "zz_custom", "format": "logfmt"}),
        parser_from_definition({"name": "aa_custom", "format": "ltsv"}),
    ]
    custom_filters = [
        filter_from_definition(
            {"name": "modify", "match": "custom-*", "remove_fields": ["token"]}
        ),
        filter_from_definition({"name": "grep", "match": "*", "regex": "log ."}),
    ]
    sources = [LogSource("datadog", "dd")]
    parsers = compose_parsers(sources, custom_parsers)
    assert parsers[-2:] == custom_parsers
    filters = compose_filters(sources, custom_filters)
    assert filters[-2:] == custom_filters
    assert filters[-2].match == "custom-*"
    assert len(filters) == 4


def test_duplicate_parser_names():
    duplicate = parser_from_definition({"name": "nginx_json", "format": "json"})
    with raises(DuplicateParserName) as error:
        compose_parsers([LogSource("nginx")], [duplicate])
    assert error.value.name == "nginx_json"
    with raises(DuplicateParserName):
        compose_parsers(
            [], [parser_from_definition({"name": "json_time", "format": "json"})]
        )
    check_unique_parser_names(compose_parsers([LogSource("php"), LogSource("dotnet")]))


def test_unknown_technology():
    with raises(UnknownTechnology):
        compose_parsers([LogSource("php"), LogSource("java")])
    with raises(UnknownTechnology):
        compose_filters([LogSource("java", "app")])
