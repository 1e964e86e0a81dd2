# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Storecart Contributors
#
# This file is part of Storecart.
#
# Storecart is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Storecart is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

from importlib import metadata

DISTRIBUTION = "storecart"

# Source checkouts that were never installed have no dist-info to read.
UNKNOWN_VERSION = "0.0.0-dev"


def installed_version(distribution: str = DISTRIBUTION) -> str:
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return UNKNOWN_VERSION


__version__ = installed_version()
