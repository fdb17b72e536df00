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

import pinject
from prometheus_client import Counter, Histogram

from .errors import TranslationError
from .namer import PathMatcherNamer
from .resource import ResourceKey
from .secrets import secrets
from .urlmap import to_url_map

LOG = logging.getLogger(__name__)


class TranslatorBindings(pinject.BindingSpec):
    def configure(self, bind):
        bind("translator", to_class=Translator)

    def provide_path_matcher_namer(self, config):
        return PathMatcherNamer(config.path_matcher_hash, config.path_matcher_hash_width)

    def provide_resource_key(self, config):
        return ResourceKey(project=config.project, resource=config.resource, region=config.region, zone=config.zone)


class Translator(object):
    """Translates the routing of an ingress into the resources of a load balancer

    The url map and the TLS secrets are independent passes, neither depends on the result of the other.
    """

    def __init__(self, path_matcher_namer, resource_key):
        self._path_matcher_namer = path_matcher_namer
        self._resource_key = resource_key
        self._translations = Counter("urlmap_translations", "URL map translations", ["result"])
        self._validations = Counter("tls_secret_validations", "TLS secret validations", ["result"])
        self._path_rules = Histogram("urlmap_path_rules", "Path rules per URL map", buckets=(1, 5, 10, 50, 100, 500))

    def url_map(self, routing_spec, frontend_namer):
        try:
            url_map = to_url_map(routing_spec, frontend_namer, self._resource_key, self._path_matcher_namer)
        except TranslationError:
            self._translations.labels("failure").inc()
            raise
        self._translations.labels("success").inc()
        self._path_rules.observe(sum(len(pm.path_rules) for pm in url_map.path_matchers))
        LOG.info("Translated %d host rules into url map %s", len(url_map.host_rules), url_map.name)
        return url_map

    def secrets(self, env):
        try:
            validated = secrets(env)
        except TranslationError:
            self._validations.labels("failure").inc()
            raise
        self._validations.labels("success").inc()
        LOG.info("Validated TLS secrets %s", ", ".join(s.metadata.name for s in validated))
        return validated
