"""
Client configuration utilities.

Usage:
    from slackrtm.config import load_rtm_config

    config = load_rtm_config("my_bot")
    dispatcher = EventDispatcher(decode_errors=config.decode_errors)
"""

from slackrtm.config.loader import RtmConfig, load_rtm_config, get_config_path

__all__ = ["RtmConfig", "load_rtm_config", "get_config_path"]
