#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Custom exceptions for ecs-log-config
"""


class LogConfigException(Exception):
    """
    Top class for ECS Log Config Exceptions
    """

    def __init__(self, msg, *args):
        super().__init__(msg, *args)


class UnknownTechnology(LogConfigException):
    """
    Exception when a log source references a technology that has no parsers/filters table
    """

    def __init__(self, name, known: list = None):
        self.name = name
        self.known = known if known else []
        super().__init__(
            f"Technology {name!r} is not supported. Must be one of {self.known}"
        )


class InvalidCustomRecord(LogConfigException):
    """
    Exception when a parser or filter definition does not match the fields required or allowed for its kind
    """

    def __init__(self, record_type: str, record: dict, reason: str):
        self.record_type = record_type
        self.record = record
        self.reason = reason
        super().__init__(f"Invalid {record_type} definition - {reason}")


class DuplicateParserName(LogConfigException):
    """
    Exception when two parsers in the final parsers list share the same name
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Parser {name!r} is defined more than once")
