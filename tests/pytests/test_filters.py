#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

from pytest import mark, raises

from ecs_log_config.exceptions import InvalidCustomRecord
from ecs_log_config.filters import (
    CONTAINER_MATCH,
    GrepFilter,
    ModifyFilter,
    NestFilter,
    ParserFilter,
    container_match,
    filter_from_definition,
)


def test_container_match():
    assert container_match(CONTAINER_MATCH, "app") == "*app*"
    assert container_match(CONTAINER_MATCH, "*") == "*"
    assert container_match("firelens-${container}-*", "web") == "firelens-web-*"
    assert container_match("app-firelens*", "web") == "app-firelens*"


def test_filter_classes_by_name():
    assert isinstance(
        filter_from_definition({"name": "grep", "match": "*", "regex": "log ^a"}),
        GrepFilter,
    )
    assert isinstance(
        filter_from_definition(
            {"name": "modify", "match": "*", "remove_fields": ["secret"]}
        ),
        ModifyFilter,
    )
    assert isinstance(
        filter_from_definition(
            {"name": "parser", "match": "*", "parser": "json_time", "key_name": "log"}
        ),
        ParserFilter,
    )
    assert isinstance(
        filter_from_definition(
            {
                "name": "nest",
                "match": "*",
                "operation": "nest",
                "wildcard": "kube_*",
                "nest_under": "kubernetes",
            }
        ),
        NestFilter,
    )


def test_for_container_returns_new_filter():
    template = filter_from_definition(
        {
            "name": "modify",
            "match": CONTAINER_MATCH,
            "add_fields": {"log_source": "php"},
        }
    )
    app_filter = template.for_container("app")
    assert isinstance(app_filter, ModifyFilter)
    assert app_filter.match == "*app*"
    assert template.match == CONTAINER_MATCH
    assert app_filter.add_fields == {"log_source": "php"}


def test_to_dict_omits_unset():
    grep = filter_from_definition(
        {"name": "grep", "match": "*app*", "exclude": "log PHP Deprecated:"}
    )
    assert grep.to_dict() == {
        "name": "grep",
        "match": "*app*",
        "exclude": "log PHP Deprecated:",
    }


@mark.parametrize(
    "definition",
    [
        {"name": "grep", "match": "*"},
        {"name": "grep", "regex": "log a"},
        {"name": "grep", "match": "*", "regex": "log a", "add_fields": {"a": "b"}},
        {"name": "modify", "match": "*"},
        {"name": "modify", "match": "*", "add_fields": {}},
        {"name": "modify", "match": "*", "add_fields": {"a": 1}},
        {"name": "parser", "match": "*", "parser": "json_time"},
        {"name": "parser", "match": "*", "key_name": "log"},
        {"name": "nest", "match": "*", "operation": "nest", "wildcard": "a*"},
        {"name": "nest", "match": "*", "operation": "lift"},
        {
            "name": "nest",
            "match": "*",
            "operation": "lift",
            "nested_under": "a",
            "wildcard": "a*",
        },
        {"name": "nest", "match": "*", "operation": "flatten", "nested_under": "a"},
        {"name": "lua", "match": "*"},
        {"name": "grep", "match": "", "regex": "log a"},
    ],
)
def test_invalid_filters(definition):
    with raises(InvalidCustomRecord) as error:
        filter_from_definition(definition)
    assert error.value.record_type == "filter"


def test_fluentbit_properties():
    modify = filter_from_definition(
        {
            "name": "modify",
            "match": "*web*",
            "add_fields": {"log_source": "nginx"},
            "rename_fields": {"msg": "message"},
            "remove_fields": ["password"],
        }
    )
    assert modify.fluentbit_properties() == [
        ("Name", "modify"),
        ("Match", "*web*"),
        ("Add", "log_source nginx"),
        ("Rename", "msg message"),
        ("Remove", "password"),
    ]
    parser = filter_from_definition(
        {
            "name": "parser",
            "match": "*",
            "parser": "php_error",
            "key_name": "log",
            "reserve_data": True,
        }
    )
    assert parser.fluentbit_properties() == [
        ("Name", "parser"),
        ("Match", "*"),
        ("Key_Name", "log"),
        ("Parser", "php_error"),
        ("Reserve_Data", "On"),
    ]
    nest = filter_from_definition(
        {
            "name": "nest",
            "match": "*",
            "operation": "lift",
            "nested_under": "Properties",
            "add_prefix": "properties_",
        }
    )
    assert nest.fluentbit_properties() == [
        ("Name", "nest"),
        ("Match", "*"),
        ("Operation", "lift"),
        ("Nested_under", "Properties"),
        ("Add_prefix", "properties_"),
    ]
