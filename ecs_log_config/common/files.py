#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Functions and classes to write the log configuration to files or stdout
"""

from __future__ import annotations

import json
from os import makedirs, path

import yaml

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper

from ecs_log_config.common.logging import LOG

JSON_MIME = "application/json"
YAML_MIME = "application/x-yaml"
TEXT_MIME = "text/plain"


class FileArtifact:
    """
    Class for a file to write, from either text content or a mapping to serialize.
    """

    def __init__(self, file_name: str, content=None, body: str = None):
        self.file_name = file_name
        self.content = content
        self.body = body
        self.mime = TEXT_MIME
        if self.file_name.endswith(".json"):
            self.mime = JSON_MIME
        elif self.file_name.endswith(".yml") or self.file_name.endswith(".yaml"):
            self.mime = YAML_MIME
        if self.body is None:
            self.define_body()

    def __repr__(self):
        return self.file_name

    def define_body(self):
        if self.content is None:
            raise ValueError(f"{self.file_name} - No content nor body to write")
        if self.mime == YAML_MIME:
            self.body = yaml.dump(self.content, Dumper=Dumper, sort_keys=False)
        elif self.mime == JSON_MIME:
            self.body = json.dumps(self.content, indent=4)
        else:
            self.body = str(self.content)

    def write(self, output_dir: str) -> str:
        """
        Writes the file into the output directory, created if needed

        :return: the path of the written file
        """
        makedirs(output_dir, exist_ok=True)
        file_path = path.abspath(f"{output_dir}/{self.file_name}")
        with open(file_path, "w", encoding="utf-8") as file_fd:
            file_fd.write(self.body)
        LOG.info(f"{self.file_name} - written to {file_path}")
        return file_path
