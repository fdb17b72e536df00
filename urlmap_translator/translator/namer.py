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
import hashlib

# The compute API uses the name of a path matcher to bind it to a host rule
HOST_RULE_PREFIX = "host"
DEFAULT_PREFIX = "k8s"
# shake digests have no fixed length
SUPPORTED_ALGORITHMS = sorted(a for a in hashlib.algorithms_guaranteed if not a.startswith("shake_"))


class PathMatcherNamer(object):
    """Names the path matcher of a host rule

    A host rule can be a wildcard or contain characters that are not allowed in resource names, so the name is a
    hex digest of the hostname. Distinct hostnames hashing to the same name is an accepted risk; use a wider
    algorithm if that matters.
    """

    def __init__(self, algorithm="md5", width=None, prefix=HOST_RULE_PREFIX):
        if algorithm not in SUPPORTED_ALGORITHMS:
            raise ValueError("Unknown hash algorithm {!r}".format(algorithm))
        if width is not None and width <= 0:
            raise ValueError("Path matcher hash width must be positive, got {}".format(width))
        self._algorithm = algorithm
        self._width = width
        self._prefix = prefix

    def name_for(self, hostname):
        hasher = hashlib.new(self._algorithm)
        hasher.update(hostname.encode("utf-8"))
        digest = hasher.hexdigest()
        if self._width:
            digest = digest[:self._width]
        return "{}{}".format(self._prefix, digest)

    def __repr__(self):
        return "PathMatcherNamer(algorithm={}, width={}, prefix={})".format(self._algorithm, self._width, self._prefix)


def get_name_for_path_matcher(hostname):
    return _DEFAULT_PATH_MATCHER_NAMER.name_for(hostname)


_DEFAULT_PATH_MATCHER_NAMER = PathMatcherNamer()


class FrontendNamer(object):
    def url_map(self):
        raise NotImplementedError("Subclass must override url_map")


class LegacyFrontendNamer(FrontendNamer):
    def __init__(self, namespace, name, prefix=DEFAULT_PREFIX, cluster_uid=""):
        self._namespace = namespace
        self._name = name
        self._prefix = prefix
        self._cluster_uid = cluster_uid

    def url_map(self):
        return _with_uid("{}-um-{}-{}".format(self._prefix, self._namespace, self._name), self._cluster_uid)


class BackendNamer(object):
    def __init__(self, prefix=DEFAULT_PREFIX, cluster_uid=""):
        self._prefix = prefix
        self._cluster_uid = cluster_uid

    def backend(self, namespace, service, port):
        return _with_uid("{}-be-{}-{}-{}".format(self._prefix, namespace, service, port), self._cluster_uid)


def _with_uid(name, cluster_uid):
    if cluster_uid:
        return "{}--{}".format(name, cluster_uid)
    return name
