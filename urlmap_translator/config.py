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
import re
from argparse import Namespace

import configargparse

from .translator.namer import SUPPORTED_ALGORITHMS

DEFAULT_CONFIG_FILE = "/var/run/config/urlmap-translator/config.yaml"
DEFAULT_BACKEND = "kube-system/default-http-backend:80"

INGRESS_SOURCE_LONG_HELP = """
The ingress to translate is either read from a manifest file (YAML or JSON),
or fetched from the apiserver by name. Exactly one of `--ingress-file` and
`--ingress` must be given.
"""

PATH_MATCHER_LONG_HELP = """
Every host rule in the url map gets its own path matcher, named `host` followed
by a hex digest of the hostname. Names are deterministic, so the same hostname
always gets the same path matcher. Two different hostnames hashing to the same
name is an accepted risk; choose a wider algorithm (eg. sha256) to make it less
likely. The width truncates the digest to the given number of hex characters.
"""

RESOURCE_SCOPE_LONG_HELP = """
Backend services are referenced by resource path, eg.
`global/backendServices/<name>`. Give `--region` or `--zone` for regional or
zonal load balancers. `--project` is only used for self links.
"""

DEFAULT_BACKEND_HELP = """
Backend to use when the ingress has no default backend, given as
`<namespace>/<service>:<port>`.
"""

EPILOG = """
Args that start with '--' (eg. --log-format) can also be set in a config file
({} or specified via -c). The config file uses YAML syntax and must represent
a YAML 'mapping' (for details, see http://learn.getgrav.org/advanced/yaml).

If an arg is specified in more than one place, then commandline values
override config file values which override defaults.
""".format(
    DEFAULT_CONFIG_FILE
)


class Configuration(Namespace):
    VALID_LOG_FORMAT = ("plain", "json")
    VALID_OUTPUT_FORMAT = ("yaml", "json")

    def __init__(self, args=None, **kwargs):
        super(Configuration, self).__init__(**kwargs)
        self._logger = logging.getLogger(__name__)
        self._parse_args(args)
        self._validate()

    def _parse_args(self, args):
        parser = configargparse.ArgParser(
            add_config_file_help=False,
            add_env_var_help=False,
            config_file_parser_class=configargparse.YAMLConfigFileParser,
            default_config_files=[DEFAULT_CONFIG_FILE],
            args_for_setting_config_path=["-c", "--config-file"],
            ignore_unknown_config_file_keys=True,
            description="%(prog)s translates the routing of a Kubernetes Ingress into a GCE url map",
            epilog=EPILOG,
            formatter_class=configargparse.ArgumentDefaultsHelpFormatter,
        )
        parser.add_argument(
            "--log-format", help="Set logformat (default: %(default)s)", choices=self.VALID_LOG_FORMAT, default="plain"
        )
        parser.add_argument(
            "--debug",
            help="Enable a number of debugging options (including disable SSL-verification)",
            action="store_true",
        )
        parser.add_argument(
            "--output-format",
            help="Format of the url map written to stdout (default: %(default)s)",
            choices=self.VALID_OUTPUT_FORMAT,
            default="yaml",
        )
        parser.add_argument(
            "--validate-tls",
            help="Fetch the secrets referenced from the TLS section of the ingress, and check that they hold "
                 "a certificate and a private key",
            action="store_true",
        )
        source_parser = parser.add_argument_group("Ingress source", INGRESS_SOURCE_LONG_HELP)
        source_parser.add_argument("--ingress-file", help="Manifest file containing the ingress", default=None)
        source_parser.add_argument("--ingress", help="Name of the ingress to fetch from the apiserver", default=None)
        source_parser.add_argument("--namespace", help="Namespace of the ingress", default="default")
        naming_parser = parser.add_argument_group("Naming")
        naming_parser.add_argument("--name-prefix", help="Prefix for generated resource names", default="k8s")
        naming_parser.add_argument(
            "--cluster-uid", help="Cluster UID appended to generated resource names", default=""
        )
        path_matcher_parser = parser.add_argument_group("Path matcher names", PATH_MATCHER_LONG_HELP)
        path_matcher_parser.add_argument(
            "--path-matcher-hash",
            help="Hash algorithm for path matcher names (default: %(default)s)",
            choices=SUPPORTED_ALGORITHMS,
            default="md5",
        )
        path_matcher_parser.add_argument(
            "--path-matcher-hash-width",
            help="Number of hex characters of the digest to use (default: the full digest)",
            type=int,
            default=None,
        )
        scope_parser = parser.add_argument_group("Resource scope", RESOURCE_SCOPE_LONG_HELP)
        scope_parser.add_argument("--project", help="Project owning the load balancer resources", default="")
        scope_parser.add_argument("--resource", help="Kind of resource backends refer to", default="backendServices")
        location = scope_parser.add_mutually_exclusive_group()
        location.add_argument("--region", help="Region of regional backend services", default=None)
        location.add_argument("--zone", help="Zone of zonal backend services", default=None)
        parser.add_argument(
            "--default-backend", help=DEFAULT_BACKEND_HELP, type=BackendReference, default=DEFAULT_BACKEND
        )
        api_parser = parser.add_argument_group("API server")
        api_parser.add_argument(
            "--api-server",
            help="Address of the api-server to use (IP or name)",
            default="https://kubernetes.default.svc.cluster.local",
        )
        api_parser.add_argument("--api-token", help="Token to use (default: lookup from service account)", default=None)
        api_parser.add_argument(
            "--api-cert", help="API server certificate (default: lookup from service account)", default=None
        )
        client_cert_parser = parser.add_argument_group("Client certificate")
        client_cert_parser.add_argument("--client-cert", help="Client certificate to use", default=None)
        client_cert_parser.add_argument("--client-key", help="Client certificate key to use", default=None)

        parser.parse_args(args, namespace=self)

    def _validate(self):
        if bool(self.ingress_file) == bool(self.ingress):
            raise InvalidConfigurationException("Exactly one of --ingress-file and --ingress must be given")
        if self.path_matcher_hash_width is not None and self.path_matcher_hash_width <= 0:
            raise InvalidConfigurationException(
                "--path-matcher-hash-width must be positive, got {}".format(self.path_matcher_hash_width)
            )

    def __repr__(self):
        return "Configuration({})".format(
            ", ".join(
                "{}={}".format(key, self.__dict__[key])
                for key in vars(self)
                if not key.startswith("_") and not key.isupper() and "token" not in key and "key" not in key
            )
        )


class BackendReference(object):
    PATTERN = re.compile(r"^(?:(?P<namespace>[^/]+)/)?(?P<service>[^/:]+):(?P<port>[^/:]+)$")

    def __init__(self, arg):
        m = self.PATTERN.match(arg)
        if not m:
            raise ValueError("Backend must be given as <namespace>/<service>:<port>, got {!r}".format(arg))
        self.namespace = m.group("namespace") or "default"
        self.service = m.group("service")
        self.port = _int_or_unicode(m.group("port"))

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        return (other.namespace, other.service, other.port) == (self.namespace, self.service, self.port)

    def __str__(self):
        return "{}/{}:{}".format(self.namespace, self.service, self.port)

    def __repr__(self):
        return "BackendReference({})".format(self)


class InvalidConfigurationException(Exception):
    pass


def _int_or_unicode(arg):
    """Accept a number or a (unicode) string, but not a number as a string"""
    try:
        return int(arg)
    except ValueError:
        return str(arg)
