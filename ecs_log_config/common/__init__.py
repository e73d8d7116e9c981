#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Most commonly used functions shared across all modules.
"""

from __future__ import annotations

import re

LABEL_INVALID_CHARS = re.compile(r"[^a-zA-Z0-9-]")


def merge_definitions(base: dict, override: dict) -> dict:
    """
    Merges two input definitions into a new one. Mappings are merged recursively,
    lists are concatenated and for any other value, override wins.

    :param dict base:
    :param dict override:
    :rtype: dict
    """
    merged = dict(base)
    for key, value in override.items():
        if key not in merged:
            merged[key] = value
        elif isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_definitions(merged[key], value)
        elif isinstance(merged[key], list) and isinstance(value, list):
            merged[key] = merged[key] + value
        else:
            merged[key] = value
    return merged
