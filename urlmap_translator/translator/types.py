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
import base64

from k8s.base import Model
from k8s.fields import Field
from k8s.models.common import ObjectMeta

TLS_CERT_KEY = "tls.crt"
TLS_PRIVATE_KEY_KEY = "tls.key"


class Secret(Model):
    class Meta:
        list_url = "/api/v1/secrets"
        url_template = "/api/v1/namespaces/{namespace}/secrets/{name}"

    apiVersion = Field(str, "v1")  # NOQA
    kind = Field(str, "Secret")

    metadata = Field(ObjectMeta)
    data = Field(dict)
    type = Field(str)

    @property
    def certificate(self):
        return _decode(self.data, TLS_CERT_KEY)

    @property
    def private_key(self):
        return _decode(self.data, TLS_PRIVATE_KEY_KEY)


def _decode(data, key):
    value = (data or {}).get(key)
    if value is None:
        return None
    return base64.b64decode(value)
