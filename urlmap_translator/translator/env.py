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
from collections import namedtuple

from .types import Secret

LOG = logging.getLogger(__name__)

# secrets_map holds the secrets of the ingress namespace, by name
Env = namedtuple("Env", [
    "ingress",
    "secrets_map"])


def new_env(ingress):
    """Build an Env for ingress, listing all secrets in its namespace

    Errors from the apiserver are not handled here.
    """
    namespace = ingress.metadata.namespace
    secrets_map = {secret.metadata.name: secret for secret in Secret.list(namespace=namespace)}
    LOG.debug("Found %d secrets in namespace %s", len(secrets_map), namespace)
    return Env(ingress=ingress, secrets_map=secrets_map)
