"""Configuration management for the Travis CI client."""

from trav3.config.trav3_config import Trav3Config

__all__ = ["Trav3Config"]
