#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

from os import path

from behave import given, then

from ecs_log_config import exceptions
from ecs_log_config.common.settings import load_input_file
from ecs_log_config.log_config import LogConfig


def here():
    return path.abspath(path.dirname(__file__))


@given("I use {file_path} as my log config file")
def step_impl(context, file_path):
    """
    Function to import the log config file from use-cases.

    :param context:
    :param str file_path:
    """
    cases_path = path.abspath(f"{here()}/../../../{file_path}")
    context.definition = load_input_file(cases_path)


@given("I add log source {name} for container {container}")
def step_impl(context, name, container):
    context.definition.setdefault("log_sources", []).append(
        {"name": name, "container": container}
    )


@given("I remove all log sources")
def step_impl(context):
    context.definition["log_sources"] = []


@then("I generate the log config")
def step_impl(context):
    context.log_config = LogConfig.from_definition(context.definition)


@then("generating the log config fails with {error_name}")
def step_impl(context, error_name):
    error_class = getattr(exceptions, error_name)
    try:
        LogConfig.from_definition(context.definition)
    except error_class as error:
        context.error = error
    assert isinstance(context.error, error_class)


@then("the parsers include {names}")
def step_impl(context, names):
    parsers_names = [
        _parser["name"] for _parser in context.log_config.log_config_parsers
    ]
    for name in names.split(","):
        assert name.strip() in parsers_names, (name, parsers_names)


@then("the parser {name} is present once")
def step_impl(context, name):
    parsers_names = [
        _parser["name"] for _parser in context.log_config.log_config_parsers
    ]
    assert parsers_names.count(name) == 1


@then("there are {count:d} filters")
def step_impl(context, count):
    assert len(context.log_config.log_config_filters) == count


@then('there is a grep filter excluding "{value}" matching {match}')
def step_impl(context, value, match):
    assert {
        "name": "grep",
        "match": match,
        "exclude": value,
    } in context.log_config.log_config_filters


@then('there is a grep filter including "{value}" matching {match}')
def step_impl(context, value, match):
    assert {
        "name": "grep",
        "match": match,
        "regex": value,
    } in context.log_config.log_config_filters


@then("there is a modify filter adding {key} {value} matching {match}")
def step_impl(context, key, value, match):
    assert {
        "name": "modify",
        "match": match,
        "add_fields": {key: value},
    } in context.log_config.log_config_filters


@then("the last parser is {name}")
def step_impl(context, name):
    assert context.log_config.log_config_parsers[-1]["name"] == name


@then("the last filter is a {kind} filter matching {match}")
def step_impl(context, kind, match):
    last_filter = context.log_config.log_config_filters[-1]
    assert last_filter["name"] == kind
    assert last_filter["match"] == match
