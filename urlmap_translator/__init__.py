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


import json
import logging
import sys

import pinject
import pyaml
from k8s import config as k8s_config
from k8s.client import K8sClientException

from .config import Configuration, InvalidConfigurationException
from .log_extras import set_extras, clear_extras
from .logsetup import init_logging
from .specs import SpecBindings
from .translator import TranslatorBindings
from .translator.env import new_env
from .translator.errors import TranslationError


class MainBindings(pinject.BindingSpec):
    def __init__(self, config: Configuration, output=None):
        self._config = config
        self._output = output if output is not None else sys.stdout

    def configure(self, bind):
        bind("config", to_instance=self._config)
        bind("output", to_instance=self._output)


class Main(object):
    def __init__(self, config, ingress_loader, routing_spec_factory, translator, output):
        self._config = config
        self._ingress_loader = ingress_loader
        self._routing_spec_factory = routing_spec_factory
        self._translator = translator
        self._output = output

    def run(self):
        ingress = self._ingress_loader()
        set_extras(ingress)
        try:
            routing_spec = self._routing_spec_factory(ingress)
            url_map = self._translator.url_map(routing_spec, self._routing_spec_factory.frontend_namer(ingress))
            if self._config.validate_tls:
                self._translator.secrets(new_env(ingress))
            write_url_map(url_map, self._config.output_format, self._output)
        finally:
            clear_extras()
        return url_map


def write_url_map(url_map, output_format, output):
    if output_format == "json":
        json.dump(url_map.as_dict(), output, indent=2)
        output.write("\n")
    else:
        pyaml.dump(url_map.as_dict(), output)


def init_k8s_client(config: Configuration, log: logging.Logger):
    if config.client_cert:
        k8s_config.cert = (config.client_cert, config.client_key)

    if config.api_token:
        k8s_config.api_token = config.api_token
    else:
        # use default in-cluster config if api_token is not explicitly set
        try:
            # sets api_token_source and verify_ssl
            k8s_config.use_in_cluster_config()
        except IOError as e:
            if not config.client_cert:
                log.debug("No apiserver auth config was specified, and in-cluster config could not be set up: %s", str(e))

    # if api_cert or debug is explicitly set, override in-cluster config setting (if used)
    if config.api_cert:
        k8s_config.verify_ssl = config.api_cert
    elif config.debug:
        k8s_config.verify_ssl = not config.debug

    k8s_config.api_server = config.api_server
    k8s_config.debug = config.debug


def _needs_apiserver(config: Configuration):
    return bool(config.ingress) or config.validate_tls


def main(args=None, output=None):
    try:
        cfg = Configuration(args)
    except InvalidConfigurationException as e:
        sys.exit("urlmap-translator: {}".format(e))
    init_logging(cfg)
    log = logging.getLogger(__name__)
    if _needs_apiserver(cfg):
        init_k8s_client(cfg, log)

    try:
        log.debug("urlmap-translator starting with configuration {!r}".format(cfg))
        binding_specs = [
            MainBindings(cfg, output),
            SpecBindings(),
            TranslatorBindings(),
        ]
        obj_graph = pinject.new_object_graph(modules=None, binding_specs=binding_specs)
        obj_graph.provide(Main).run()
    except TranslationError as e:
        log.error("Unable to translate ingress: %s", e)
        sys.exit(1)
    except K8sClientException:
        log.exception("Error while talking to the apiserver")
        sys.exit(1)


if __name__ == "__main__":
    main()
