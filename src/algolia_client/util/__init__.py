"""Shared utilities for algolia_client."""

from algolia_client.util.logging import setup_logging
from algolia_client.util.paths import api_path, build_params_string

__all__ = ["api_path", "build_params_string", "setup_logging"]
