"""
bladetags CLI package.

Commands are auto-discovered from ``cli/commands``; each module exposes
``SUMMARY``, ``register_args(parser)`` and ``main(args) -> int``.
"""
from ._output import OutputFormatter
from ._args import add_config_flag, add_json_flag, add_prefix_flag
from ._utils import get_config_manager

__all__ = [
    "OutputFormatter",
    "add_config_flag",
    "add_json_flag",
    "add_prefix_flag",
    "get_config_manager",
]
