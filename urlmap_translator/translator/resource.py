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
from collections import namedtuple

from .errors import MalformedInput

BACKEND_SERVICES = "backendServices"
COMPUTE_API_ROOT = "https://www.googleapis.com/compute/{version}/projects/{project}/"


class ResourceKey(namedtuple("ResourceKey", [
    "project",
    "resource",
    "name",
    "region",
    "zone",
])):
    """Identifies a single compute resource

    A key is a value: resolving a new name goes through `with_name`, which returns a fresh key and leaves the
    template it was called on untouched. The same template can therefore be shared between concurrent translations.
    """
    __slots__ = ()

    def __new__(cls, project="", resource=BACKEND_SERVICES, name="", region=None, zone=None):
        if region and zone:
            raise ValueError("A resource key is either regional or zonal, not both")
        return super(ResourceKey, cls).__new__(cls, project, resource, name, region, zone)

    def with_name(self, name):
        if not name:
            raise MalformedInput("Unable to resolve {} without a name".format(self.resource))
        return self._replace(name=name)

    @property
    def scope(self):
        if self.zone:
            return "zonal"
        if self.region:
            return "regional"
        return "global"

    def resource_path(self):
        if not self.name:
            raise MalformedInput("Resource key for {} has no name".format(self.resource))
        if self.zone:
            return "zones/{}/{}/{}".format(self.zone, self.resource, self.name)
        if self.region:
            return "regions/{}/{}/{}".format(self.region, self.resource, self.name)
        return "global/{}/{}".format(self.resource, self.name)

    def self_link(self, version="v1"):
        if not self.project:
            raise MalformedInput("A self link for {} needs a project".format(self.resource_path()))
        return COMPUTE_API_ROOT.format(version=version, project=self.project) + self.resource_path()
