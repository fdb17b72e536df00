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
import pinject

from ..translator.namer import BackendNamer
from .factory import RoutingSpecFactory
from .loader import IngressLoader


class SpecBindings(pinject.BindingSpec):
    def configure(self, bind):
        bind("routing_spec_factory", to_class=RoutingSpecFactory)
        bind("ingress_loader", to_class=IngressLoader)

    def provide_backend_namer(self, config):
        return BackendNamer(config.name_prefix, config.cluster_uid)
