#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Registry of the supported technologies, keyed by the name log sources use.
"""

from __future__ import annotations

from ecs_log_config.exceptions import UnknownTechnology

from .datadog import DATADOG
from .defaults import DEFAULT_PARSERS
from .dotnet import DOTNET
from .nginx import NGINX
from .php import PHP
from .technology import Technology

TECHNOLOGIES: dict = {
    _technology.name: _technology for _technology in (PHP, NGINX, DATADOG, DOTNET)
}


def get_technology(name: str) -> Technology:
    """
    :param str name: the technology key
    :raises UnknownTechnology: if there is no table for that technology
    """
    if not name or name not in TECHNOLOGIES:
        raise UnknownTechnology(name, list(TECHNOLOGIES.keys()))
    return TECHNOLOGIES[name]


__all__ = ["TECHNOLOGIES", "DEFAULT_PARSERS", "Technology", "get_technology"]
