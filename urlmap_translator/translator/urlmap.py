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
"""Translate a host -> {path: backend} routing spec into a compute URL map

The URL map lets several hosts share path -> backend mappings through path matchers, eg:

    Host: foo(PathMatcher1), bar(PathMatcher1,2)
    PathMatcher1:
      /a -> b1
      /b -> b2
    PathMatcher2:
      /c -> b1

We use a single host per path matcher instead:

    Host: foo(PathMatcher1)
    PathMatcher1:
      /a -> b1
      /b -> b2
    Host: bar(PathMatcher2)
    PathMatcher2:
      /a -> b1
      /b -> b2
      /c -> b1

Adding a path to a host happens a lot more often than deleting a service, and with one path matcher per host
only that single path matcher has to be looked up and changed. Path matchers describing the same paths for
different hosts are not merged, and neither are host rules repeating a hostname.
"""

import logging
from collections import namedtuple

from .errors import MalformedInput
from .namer import get_name_for_path_matcher

LOG = logging.getLogger(__name__)


class UrlMap(namedtuple("UrlMap", [
    "name",
    "default_service",
    "host_rules",
    "path_matchers",
])):
    __slots__ = ()

    def as_dict(self):
        """Body for the compute API urlMaps insert/update calls"""
        return {
            "name": self.name,
            "defaultService": self.default_service,
            "hostRules": [{"hosts": list(hr.hosts), "pathMatcher": hr.path_matcher} for hr in self.host_rules],
            "pathMatchers": [
                {
                    "name": pm.name,
                    "defaultService": pm.default_service,
                    "pathRules": [{"paths": list(pr.paths), "service": pr.service} for pr in pm.path_rules],
                }
                for pm in self.path_matchers
            ],
        }


UrlMapHostRule = namedtuple("UrlMapHostRule", [
    "hosts",
    "path_matcher"])

PathMatcher = namedtuple("PathMatcher", [
    "name",
    "default_service",
    "path_rules"])

UrlMapPathRule = namedtuple("UrlMapPathRule", [
    "paths",
    "service"])


def to_url_map(routing_spec, frontend_namer, key, path_matcher_namer=None):
    name_for = path_matcher_namer.name_for if path_matcher_namer else get_name_for_path_matcher
    default_service = _resolve(key, routing_spec.default_backend, "default backend")

    host_rules = []
    path_matchers = []
    for host_rule in routing_spec.host_rules:
        pm_name = name_for(host_rule.hostname)
        host_rules.append(UrlMapHostRule(hosts=[host_rule.hostname], path_matcher=pm_name))
        # The compute API lets the matched rule with the longest prefix win
        path_rules = [
            UrlMapPathRule(paths=[rule.path], service=_resolve(key, rule.backend, "path {}".format(rule.path)))
            for rule in host_rule.paths
        ]
        path_matchers.append(PathMatcher(name=pm_name, default_service=default_service, path_rules=path_rules))
        LOG.debug("Host %s uses path matcher %s with %d path rules", host_rule.hostname, pm_name, len(path_rules))

    return UrlMap(
        name=frontend_namer.url_map(),
        default_service=default_service,
        host_rules=host_rules,
        path_matchers=path_matchers,
    )


def _resolve(key, backend, description):
    if backend is None:
        raise MalformedInput("No backend given for {}".format(description))
    if not backend.name:
        raise MalformedInput("Backend {} for {} has no name".format(backend, description))
    return key.with_name(backend.name).resource_path()
