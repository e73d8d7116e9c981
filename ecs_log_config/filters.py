#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Fluent Bit filters records.

The filter ``name`` is the Fluent Bit filter plugin, each one represented by its own class.
Technology filters carry a ``match`` template with a ``${container}`` placeholder which
:meth:`FilterRecord.for_container` substitutes to target a given container logs.
"""

from __future__ import annotations

import re
from copy import deepcopy
from string import Template
from typing import Union

from compose_x_common.compose_x_common import set_else_none
from jsonschema.exceptions import ValidationError

from ecs_log_config.common.logging import LOG
from ecs_log_config.exceptions import InvalidCustomRecord
from ecs_log_config.parsers import on_off
from ecs_log_config.specs import FILTER_SPEC, validate_definition

ALL_CONTAINERS = "*"
CONTAINER_MATCH = "*${container}*"
REPEATED_WILDCARDS = re.compile(r"\*{2,}")


def container_match(match_template: str, container: str) -> str:
    """
    Substitutes the container name into the match template.

    >>> container_match("*${container}*", "app")
    '*app*'
    >>> container_match("*${container}*", "*")
    '*'
    """
    match = Template(match_template).safe_substitute(container=container)
    return REPEATED_WILDCARDS.sub("*", match)


class FilterRecord:
    """
    Base class for a Fluent Bit filter

    :cvar str name: the Fluent Bit filter plugin name
    :cvar tuple optional_properties: the properties of that kind of filter, in output order
    """

    name: str = None
    optional_properties: tuple = ()

    def __init__(self, definition: dict):
        if not isinstance(definition, dict):
            raise TypeError("Filter definition must be", dict, "Got", type(definition))
        if definition.get("name") != self.name:
            raise ValueError(
                f"{type(self).__name__} requires name {self.name}. Got",
                definition.get("name"),
            )
        self._definition = deepcopy(definition)

    def __repr__(self):
        return f"{type(self).__name__}({self.match})"

    def __eq__(self, other):
        return isinstance(other, FilterRecord) and self.to_dict() == other.to_dict()

    @property
    def definition(self) -> dict:
        return deepcopy(self._definition)

    @property
    def match(self) -> str:
        return self._definition["match"]

    def for_container(self, container: str) -> FilterRecord:
        """
        Returns a new filter of the same kind with the match pattern set for the given container
        """
        definition = self.definition
        definition["match"] = container_match(self.match, container)
        return type(self)(definition)

    def to_dict(self) -> dict:
        """
        Filter as output by the module. Unset optional properties are omitted.
        """
        record: dict = {"name": self.name, "match": self.match}
        for prop in self.optional_properties:
            value = getattr(self, prop)
            if value is not None:
                record[prop] = value
        return record

    def fluentbit_properties(self) -> list:
        """
        Ordered list of (key, value) for the Fluent Bit [FILTER] section
        """
        return [("Name", self.name), ("Match", self.match)] + self.kind_properties()

    def kind_properties(self) -> list:
        return []


class GrepFilter(FilterRecord):
    """
    Keeps (regex) or drops (exclude) records. Values are ``KEY REGEX``
    """

    name = "grep"
    optional_properties = ("regex", "exclude")

    @property
    def regex(self) -> Union[str, None]:
        return set_else_none("regex", self._definition)

    @property
    def exclude(self) -> Union[str, None]:
        return set_else_none("exclude", self._definition)

    def kind_properties(self) -> list:
        properties: list = []
        if self.regex:
            properties.append(("Regex", self.regex))
        if self.exclude:
            properties.append(("Exclude", self.exclude))
        return properties


class ModifyFilter(FilterRecord):
    name = "modify"
    optional_properties = ("add_fields", "rename_fields", "remove_fields")

    @property
    def add_fields(self) -> Union[dict, None]:
        return set_else_none("add_fields", self._definition)

    @property
    def rename_fields(self) -> Union[dict, None]:
        return set_else_none("rename_fields", self._definition)

    @property
    def remove_fields(self) -> Union[list, None]:
        return set_else_none("remove_fields", self._definition)

    def kind_properties(self) -> list:
        properties: list = []
        if self.add_fields:
            properties += [
                ("Add", f"{key} {value}") for key, value in self.add_fields.items()
            ]
        if self.rename_fields:
            properties += [
                ("Rename", f"{key} {value}")
                for key, value in self.rename_fields.items()
            ]
        if self.remove_fields:
            properties += [("Remove", key) for key in self.remove_fields]
        return properties


class ParserFilter(FilterRecord):
    name = "parser"
    optional_properties = (
        "parser",
        "key_name",
        "reserve_data",
        "preserve_key",
        "unescape_key",
    )

    @property
    def parser(self) -> str:
        return self._definition["parser"]

    @property
    def key_name(self) -> str:
        return self._definition["key_name"]

    @property
    def reserve_data(self) -> Union[bool, None]:
        return self._definition.get("reserve_data")

    @property
    def preserve_key(self) -> Union[bool, None]:
        return self._definition.get("preserve_key")

    @property
    def unescape_key(self) -> Union[bool, None]:
        return self._definition.get("unescape_key")

    def kind_properties(self) -> list:
        properties: list = [("Key_Name", self.key_name), ("Parser", self.parser)]
        for key, value in (
            ("Reserve_Data", self.reserve_data),
            ("Preserve_Key", self.preserve_key),
            ("Unescape_Key", self.unescape_key),
        ):
            if value is not None:
                properties.append((key, on_off(value)))
        return properties


class NestFilter(FilterRecord):
    name = "nest"
    optional_properties = (
        "operation",
        "wildcard",
        "nest_under",
        "nested_under",
        "remove_prefix",
        "add_prefix",
    )

    @property
    def operation(self) -> str:
        return self._definition["operation"]

    @property
    def wildcard(self) -> Union[str, None]:
        return set_else_none("wildcard", self._definition)

    @property
    def nest_under(self) -> Union[str, None]:
        return set_else_none("nest_under", self._definition)

    @property
    def nested_under(self) -> Union[str, None]:
        return set_else_none("nested_under", self._definition)

    @property
    def remove_prefix(self) -> Union[str, None]:
        return set_else_none("remove_prefix", self._definition)

    @property
    def add_prefix(self) -> Union[str, None]:
        return set_else_none("add_prefix", self._definition)

    def kind_properties(self) -> list:
        properties: list = [("Operation", self.operation)]
        for key, value in (
            ("Wildcard", self.wildcard),
            ("Nest_under", self.nest_under),
            ("Nested_under", self.nested_under),
            ("Remove_prefix", self.remove_prefix),
            ("Add_prefix", self.add_prefix),
        ):
            if value:
                properties.append((key, value))
        return properties


FILTER_KINDS: dict = {
    _filter_class.name: _filter_class
    for _filter_class in (GrepFilter, ModifyFilter, ParserFilter, NestFilter)
}


def filter_from_definition(definition: dict) -> FilterRecord:
    """
    Validates the filter definition and returns the filter object for its kind

    :param dict definition:
    :raises InvalidCustomRecord: when the definition does not match the kind requirements
    """
    try:
        validate_definition(definition, FILTER_SPEC)
    except ValidationError as error:
        name = definition.get("name") if isinstance(definition, dict) else None
        LOG.error(f"filter.{name} - Definition is not conform to schema.")
        raise InvalidCustomRecord("filter", definition, error.message) from error
    return FILTER_KINDS[definition["name"]](definition)
