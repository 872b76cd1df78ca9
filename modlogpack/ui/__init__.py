"""Local UI subsystem for ModlogKit."""

from modlogpack.ui.server import UIServerConfig, build_ui_url, create_ui_server, start_ui_server

__all__ = [
    "UIServerConfig",
    "build_ui_url",
    "create_ui_server",
    "start_ui_server",
]
