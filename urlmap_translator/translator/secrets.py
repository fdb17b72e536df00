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

from .errors import SecretMissingCertField, SecretMissingKeyField, SecretNotFound
from .types import TLS_CERT_KEY, TLS_PRIVATE_KEY_KEY

LOG = logging.getLogger(__name__)


def secrets(env):
    """Return the secrets in env that are referenced from the TLS section of its ingress, in the same order"""
    return resolve_secrets(env.ingress.spec.tls, env.secrets_map)


def resolve_secrets(tls_specs, secrets_map):
    ret = []
    for tls_spec in tls_specs:
        name = _secret_name(tls_spec)
        secret = secrets_map.get(name)
        if secret is None:
            raise SecretNotFound(name)
        # Fail fast on the first field that is missing
        data = secret.data or {}
        if not data.get(TLS_CERT_KEY):
            raise SecretMissingCertField(name)
        if not data.get(TLS_PRIVATE_KEY_KEY):
            raise SecretMissingKeyField(name)
        LOG.debug("Secret %s has certificate and private key", name)
        ret.append(secret)
    return ret


def _secret_name(tls_spec):
    # Accepts both the TLS entries of an Ingress and TLSSpecs from a routing spec
    try:
        return tls_spec.secret_name
    except AttributeError:
        return tls_spec.secretName
