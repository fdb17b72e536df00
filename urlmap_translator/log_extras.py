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
import logging
import threading

_LOG_EXTRAS = threading.local()
_EXTRA_KEYS = ("namespace", "ingress_name")


class ExtraFilter(logging.Filter):
    def filter(self, record):
        extras = {}
        for key in _EXTRA_KEYS:
            extras[key] = getattr(_LOG_EXTRAS, key, "")
        record.extras = extras
        return 1


def set_extras(ingress=None, namespace=None, ingress_name=None):
    if ingress:
        namespace = ingress.metadata.namespace
        ingress_name = ingress.metadata.name
    if any(x is None for x in (namespace, ingress_name)):
        raise TypeError("Either ingress, or both of (namespace, ingress_name) must be specified")
    _LOG_EXTRAS.namespace = namespace
    _LOG_EXTRAS.ingress_name = ingress_name


def clear_extras():
    for key in _EXTRA_KEYS:
        if hasattr(_LOG_EXTRAS, key):
            delattr(_LOG_EXTRAS, key)
