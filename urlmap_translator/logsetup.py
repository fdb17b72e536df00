#!/usr/bin/env python
# -*- coding: utf-8

# Copyright 2017-2019 The FIAAS Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


import datetime
import json
import logging
import sys

from .log_extras import ExtraFilter

PLAIN_FORMAT = "[%(asctime)s|%(levelname)7s] %(message)s [%(name)s]"


class JsonFormatter(logging.Formatter):
    """One JSON object per line, with the ingress being translated under `extras`"""

    def format(self, record):
        fields = {
            "@timestamp": self.format_time(record),
            "@version": 1,
            "level": record.levelname,
            "logger": record.name,
            "thread": record.threadName,
            "message": record.getMessage(),
            "location": "{}:{}".format(record.pathname, record.lineno),
            "extras": getattr(record, "extras", {}),
        }
        if record.exc_info:
            fields["throwable"] = self.formatException(record.exc_info)
        return json.dumps(fields, default=str)

    @staticmethod
    def format_time(record):
        """ELK is strict about it's timestamp, so use more strict ISO-format"""
        return datetime.datetime.fromtimestamp(record.created).isoformat()



def init_logging(config):
    """Set up logging system

    - Always logs to stderr, stdout is where the url map is written
    - Select format from config.log_format
    -- json - Use the json formatter
    -- plain - Use plain formatting
    """
    root = logging.getLogger()
    root.setLevel(logging.INFO)
    if config.debug:
        root.setLevel(logging.DEBUG)
    root.addHandler(_create_default_handler(config))
    _set_special_levels()


def _create_default_handler(config):
    handler = logging.StreamHandler(sys.stderr)
    handler.addFilter(ExtraFilter())
    if _json_format(config):
        handler.setFormatter(JsonFormatter())
    elif _plain_format(config):
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    return handler


def _set_special_levels():
    # The k8s client dumps every request and response when debugging
    urllib3_logger = logging.getLogger("urllib3")
    if urllib3_logger.getEffectiveLevel() < logging.INFO:
        urllib3_logger.setLevel(logging.INFO)


def _json_format(config):
    return config.log_format == "json"


def _plain_format(config):
    return config.log_format == "plain"
