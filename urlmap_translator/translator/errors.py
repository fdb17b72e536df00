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


class TranslationError(Exception):
    pass


class MalformedInput(TranslationError):
    pass


class SecretError(TranslationError):
    MESSAGE = "secret {!r} is invalid"

    def __init__(self, name):
        super(SecretError, self).__init__(self.MESSAGE.format(name))
        self.name = name

    def __eq__(self, other):
        return type(other) is type(self) and other.name == self.name

    def __hash__(self):
        return hash((type(self), self.name))


class SecretNotFound(SecretError):
    MESSAGE = "secret {!r} does not exist"


class SecretMissingCertField(SecretError):
    MESSAGE = "secret {!r} does not specify cert as string data"


class SecretMissingKeyField(SecretError):
    MESSAGE = "secret {!r} does not specify private key as string data"
