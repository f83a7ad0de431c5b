"""
Client configuration management utilities.

This module loads RTM client settings from a YAML configuration file at the
project root. Each top-level key is a profile:

    my_bot:
      token: xoxb-...
      decode_errors: log
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from slackrtm.dispatch import DECODE_ERROR_POLICIES
from slackrtm.errors import InternalError, from_os_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RtmConfig:
    """
    Settings for one client profile.

    Attributes:
        token: Bot or user token. slackrtm does not open connections; the
            caller's transport passes it to rtm.connect (for example as an
            ``Authorization: Bearer`` header on the httpx request).
        decode_errors: Policy for EventDispatcher, "log" or "raise".
    """

    token: str
    decode_errors: str = "log"


def get_config_path() -> Path:
    """
    Get the path to the client configuration file.

    Looks for rtm_config.yaml in the current working directory (project root).
    """
    return Path(os.getcwd()) / "rtm_config.yaml"


def load_rtm_config(profile: str) -> RtmConfig:
    """
    Load a client profile from the YAML file at project root.

    Args:
        profile: The key identifying the profile in the config file

    Returns:
        RtmConfig for the profile

    Raises:
        FileNotFoundError: If rtm_config.yaml doesn't exist
        ValueError: If the profile or its token is missing, or decode_errors
            is not a known policy
        InternalError: If the file can't be read or isn't valid YAML
    """
    config_path = get_config_path()
    logger.debug(f"Loading config from: {config_path}")

    if not config_path.exists():
        raise FileNotFoundError(
            f"rtm_config.yaml not found at {config_path}. "
            "Copy rtm_config.yaml.example to rtm_config.yaml and add your token."
        )

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
    except OSError as e:
        raise from_os_error(e) from e
    except yaml.YAMLError as e:
        raise InternalError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise InternalError(f"Expected a mapping of profiles in {config_path}")

    profile_config = config.get(profile) or {}
    if not profile_config:
        raise ValueError(
            f"Profile '{profile}' not found in {config_path}. "
            f"Please add the profile configuration."
        )
    if not isinstance(profile_config, dict):
        raise ValueError(f"Profile '{profile}' in {config_path} must be a mapping")

    token = profile_config.get("token")
    if not token:
        raise ValueError(
            f"Missing required field for profile '{profile}': token. "
            f"Please add the bot token to {config_path}"
        )

    decode_errors = profile_config.get("decode_errors", "log")
    if decode_errors not in DECODE_ERROR_POLICIES:
        raise ValueError(
            f"Invalid decode_errors '{decode_errors}' for profile '{profile}'. "
            f"Expected one of: {', '.join(DECODE_ERROR_POLICIES)}"
        )

    return RtmConfig(token=token, decode_errors=decode_errors)
