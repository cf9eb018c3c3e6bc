#-
# #%L
# Trav3 Python Client
# %%
# Copyright (C) 2025 Contrast Security, Inc.
# %%
# Contact: support@contrastsecurity.com
# License: Commercial
# NOTICE: This Software and the patented inventions embodied within may only be
# used as part of Contrast Security's commercial offerings. Even though it is
# made available through public repositories, use of this Software is subject to
# the applicable End User Licensing Agreement found at
# https://www.contrastsecurity.com/enduser-terms-0317a or as otherwise agreed
# between Contrast Security and the End User. The Software may not be reverse
# engineered, modified, repackaged, sold, redistributed or otherwise used in a
# way not consistent with the End User License Agreement.
# #L%
#

import os
from typing import Optional, Any
from trav3 import utils
from trav3.utils import debug_log, log


class Trav3Config:
    """
    Configuration for a Travis CI client.
    Handles loading, validating, and accessing configuration values.
    """

    # Preset values
    VERSION = "0.6.0"
    USER_AGENT = f"trav3-python {VERSION}"
    API_VERSION = "3"
    DEFAULT_API_ENDPOINT = "https://api.travis-ci.org"
    VALID_API_ENDPOINTS = ["https://api.travis-ci.com", "https://api.travis-ci.org"]
    MAX_LIMIT = 100

    def __init__(self, env_vars=None):
        """
        Initialize the configuration.

        Args:
            env_vars: Optional dictionary of environment variables (for testing)
        """
        self.env_vars = os.environ if env_vars is None else env_vars
        self._load_config()

    def _get_env_var(self, var_name: str, default: Optional[Any] = None) -> Optional[str]:
        """Gets an environment variable, or the default when unset or empty."""
        value = self.env_vars.get(var_name)
        return value if value else default

    def _load_config(self):
        """Loads all configuration from environment variables."""
        self.debug_mode = self._get_env_var("TRAV3_DEBUG_MODE", default="false").lower() == "true"
        if self.debug_mode:
            # Module-level flag read by debug_log
            utils.DEBUG_MODE = True
        self.api_endpoint = self._get_env_var("TRAV3_API_ENDPOINT", default=self.DEFAULT_API_ENDPOINT)
        self.token = self._get_env_var("TRAVIS_TOKEN")
        self.default_limit = self._get_default_limit()
        self.timeout = self._get_timeout()

        debug_log(f"API Endpoint: {self.api_endpoint}")
        debug_log(f"Default Limit: {self.default_limit}")
        debug_log(f"Timeout: {self.timeout}")
        debug_log(f"Debug Mode: {self.debug_mode}")
        if self.token:
            debug_log("Travis token found.")

    def _get_default_limit(self) -> int:
        """Validates and normalizes the TRAV3_DEFAULT_LIMIT setting."""
        default_limit = 25
        try:
            limit = int(self._get_env_var("TRAV3_DEFAULT_LIMIT", default=str(default_limit)))
        except (ValueError, TypeError):
            log(f"Invalid TRAV3_DEFAULT_LIMIT value. Using default: {default_limit}", is_warning=True)
            return default_limit

        if limit < 1:
            log(f"TRAV3_DEFAULT_LIMIT ({limit}) is too low. Using minimum value: 1", is_warning=True)
            return 1
        if limit > self.MAX_LIMIT:
            log(f"TRAV3_DEFAULT_LIMIT ({limit}) exceeded the API maximum. Using {self.MAX_LIMIT}.", is_warning=True)
            return self.MAX_LIMIT
        return limit

    def _get_timeout(self) -> float:
        """Validates and normalizes the TRAV3_TIMEOUT setting (seconds)."""
        default_timeout = 30.0
        try:
            timeout = float(self._get_env_var("TRAV3_TIMEOUT", default=str(default_timeout)))
        except (ValueError, TypeError):
            log(f"Invalid TRAV3_TIMEOUT value. Using default: {default_timeout}", is_warning=True)
            return default_timeout

        if timeout <= 0:
            log(f"TRAV3_TIMEOUT must be positive, using default: {default_timeout}", is_warning=True)
            return default_timeout
        return timeout
