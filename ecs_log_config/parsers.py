#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Fluent Bit parsers records.

Each parser ``format`` is represented by its own class, all created from a definition dict via
:func:`parser_from_definition`, which validates the definition against ``parser.spec.json`` first.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Union

from compose_x_common.compose_x_common import keyisset, set_else_none
from jsonschema.exceptions import ValidationError

from ecs_log_config.common.logging import LOG
from ecs_log_config.exceptions import InvalidCustomRecord
from ecs_log_config.specs import PARSER_SPEC, validate_definition


def on_off(value: bool) -> str:
    return "On" if value else "Off"


class FilterBinding:
    """
    Settings the downstream consumer uses to pair the parser to a Fluent Bit ``parser`` filter.
    Not evaluated here, only passed through with its defaults set.
    """

    default_match = "*"
    default_key_name = "log"

    def __init__(self, definition: dict):
        self._definition = deepcopy(definition)

    @property
    def match(self) -> Union[str, None]:
        return set_else_none("match", self._definition)

    @property
    def key_name(self) -> Union[str, None]:
        return set_else_none("key_name", self._definition)

    @property
    def reserve_data(self) -> bool:
        return keyisset("reserve_data", self._definition)

    @property
    def preserve_key(self) -> bool:
        return keyisset("preserve_key", self._definition)

    @property
    def unescape_key(self) -> bool:
        return keyisset("unescape_key", self._definition)

    def to_dict(self) -> dict:
        binding: dict = {}
        if self.match:
            binding["match"] = self.match
        if self.key_name:
            binding["key_name"] = self.key_name
        binding.update(
            {
                "reserve_data": self.reserve_data,
                "preserve_key": self.preserve_key,
                "unescape_key": self.unescape_key,
            }
        )
        return binding

    def __eq__(self, other):
        return isinstance(other, FilterBinding) and self.to_dict() == other.to_dict()


class ParserRecord:
    """
    Base class for a Fluent Bit parser

    :cvar str format: the Fluent Bit parser format this class represents
    :cvar tuple optional_properties: the optional properties, in output order
    """

    format: str = None
    optional_properties: tuple = (
        "time_key",
        "time_format",
        "time_keep",
        "decode_field",
        "decode_field_as",
        "types",
        "skip_empty_values",
    )

    def __init__(self, definition: dict):
        if not isinstance(definition, dict):
            raise TypeError("Parser definition must be", dict, "Got", type(definition))
        if definition.get("format") != self.format:
            raise ValueError(
                f"{type(self).__name__} requires format {self.format}. Got",
                definition.get("format"),
            )
        self._definition = deepcopy(definition)
        self._filter = (
            FilterBinding(self._definition["filter"])
            if isinstance(self._definition.get("filter"), dict)
            else None
        )

    def __repr__(self):
        return f"{type(self).__name__}({self.name})"

    def __eq__(self, other):
        return isinstance(other, ParserRecord) and self.to_dict() == other.to_dict()

    @property
    def definition(self) -> dict:
        return deepcopy(self._definition)

    @property
    def name(self) -> str:
        return self._definition["name"]

    @property
    def time_key(self) -> Union[str, None]:
        return set_else_none("time_key", self._definition)

    @property
    def time_format(self) -> Union[str, None]:
        return set_else_none("time_format", self._definition)

    @property
    def time_keep(self) -> Union[bool, None]:
        return self._definition.get("time_keep")

    @property
    def decode_field(self) -> Union[str, None]:
        return set_else_none("decode_field", self._definition)

    @property
    def decode_field_as(self) -> Union[str, None]:
        return set_else_none("decode_field_as", self._definition)

    @property
    def types(self) -> Union[str, None]:
        return set_else_none("types", self._definition)

    @property
    def skip_empty_values(self) -> Union[bool, None]:
        return self._definition.get("skip_empty_values")

    @property
    def filter(self) -> Union[FilterBinding, None]:
        return self._filter

    def to_dict(self) -> dict:
        """
        Parser as output by the module. Unset optional properties are omitted.
        """
        parser: dict = {"name": self.name, "format": self.format}
        for prop in self.optional_properties:
            value = getattr(self, prop)
            if value is not None:
                parser[prop] = value
        if self.filter:
            parser["filter"] = self.filter.to_dict()
        return parser

    def fluentbit_properties(self) -> list:
        """
        Ordered list of (key, value) for the Fluent Bit [PARSER] section
        """
        properties: list = [("Name", self.name), ("Format", self.format)]
        properties += self.format_properties()
        if self.time_key:
            properties.append(("Time_Key", self.time_key))
        if self.time_format:
            properties.append(("Time_Format", self.time_format))
        if self.time_keep is not None:
            properties.append(("Time_Keep", on_off(self.time_keep)))
        if self.decode_field:
            properties.append(
                ("Decode_Field_As", f"{self.decode_field_as} {self.decode_field}")
            )
        if self.types:
            properties.append(("Types", self.types))
        if self.skip_empty_values is not None:
            properties.append(("Skip_Empty_Values", on_off(self.skip_empty_values)))
        return properties

    def format_properties(self) -> list:
        return []


class JsonParser(ParserRecord):
    format = "json"


class RegexParser(ParserRecord):
    format = "regex"
    optional_properties = ("regex",) + ParserRecord.optional_properties

    @property
    def regex(self) -> str:
        return self._definition["regex"]

    def format_properties(self) -> list:
        return [("Regex", self.regex)]


class LtsvParser(ParserRecord):
    format = "ltsv"


class LogfmtParser(ParserRecord):
    format = "logfmt"


PARSER_FORMATS: dict = {
    _parser_class.format: _parser_class
    for _parser_class in (JsonParser, RegexParser, LtsvParser, LogfmtParser)
}


def parser_from_definition(definition: dict) -> ParserRecord:
    """
    Validates the parser definition and returns the parser object for its format

    :param dict definition:
    :raises InvalidCustomRecord: when the definition does not match the format requirements
    """
    try:
        validate_definition(definition, PARSER_SPEC)
    except ValidationError as error:
        name = definition.get("name") if isinstance(definition, dict) else None
        LOG.error(f"parser.{name} - Definition is not conform to schema.")
        raise InvalidCustomRecord("parser", definition, error.message) from error
    return PARSER_FORMATS[definition["format"]](definition)
