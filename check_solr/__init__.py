#!/usr/bin/env python3
# Copyright (C) 2024 check-solr contributors - License: GNU General Public License v2
# This file is part of check-solr. It is subject to the terms and conditions of
# the GNU General Public License v2.
"""Nagios compatible health check for Apache Solr cores"""

import logging

__version__ = "1.0.0"

# Set default logging handler to avoid "No handler found" warnings.
logging.getLogger(__name__).addHandler(logging.NullHandler())
