# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the beaconlinks documentation."""

project = "beaconlinks"
author = "beaconlinks Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.doctest"]

html_theme = "alabaster"
