#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

import jsonschema
from referencing.jsonschema import EMPTY_REGISTRY as _EMPTY_REGISTRY

from ecs_log_config.specs._core import _schemas

SPECS_BASE_URI = "https://ecs-log-config.compose-x.io/specs/"
LOG_CONFIG_SPEC = f"{SPECS_BASE_URI}log-config.spec.json"
PARSER_SPEC = f"{SPECS_BASE_URI}parser.spec.json"
FILTER_SPEC = f"{SPECS_BASE_URI}filter.spec.json"

REGISTRY = (_schemas() @ _EMPTY_REGISTRY).crawl()


def validate_definition(definition, spec_uri: str) -> None:
    """
    Validates the definition against one of the registered schemas.
    Raises jsonschema.exceptions.ValidationError when not conform.

    :param definition: the definition to validate
    :param str spec_uri: the $id of the schema to validate against
    """
    jsonschema.validate(definition, REGISTRY.contents(spec_uri), registry=REGISTRY)


__all__ = [
    "REGISTRY",
    "LOG_CONFIG_SPEC",
    "PARSER_SPEC",
    "FILTER_SPEC",
    "validate_definition",
]
