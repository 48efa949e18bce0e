# Copyright 2026 AdaLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the adalex documentation."""

project = "AdaLex"
author = "AdaLex Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

autodoc_mock_imports = ["yachalk"]

html_theme = "alabaster"
