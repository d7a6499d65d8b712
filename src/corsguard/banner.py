"""
This module defines the startup banner for the corsguard server.

It uses `colorama` for cross-platform colored output on stderr.
"""

import sys

from colorama import Fore, Style, init

from . import __version__

init(autoreset=True)


BANNER = r"""
==============================================================================
                            C O R S G U A R D
------------------------------------------------------------------------------
            Cross-Origin Resource Sharing interceptor | v{version}
==============================================================================
"""

SERVER_WELCOME = """
Server ready! API documentation available at /docs
"""

COLOR_MAP = {
    "cyan": Fore.CYAN,
    "green": Fore.GREEN,
    "yellow": Fore.YELLOW,
    "blue": Fore.BLUE,
    "magenta": Fore.MAGENTA,
    "red": Fore.RED,
    "white": Fore.WHITE,
}


def get_colored_banner(banner_text: str, color: str | None = None) -> str:
    """
    Applies color to the banner text.

    Args:
        banner_text: The text of the banner.
        color: The desired color name (e.g., 'cyan', 'green'), or None for plain text.

    Returns:
        The colored banner text.
    """
    if not color:
        return banner_text

    fore_color = COLOR_MAP.get(color.lower(), Fore.CYAN)
    return f"{fore_color}{banner_text}{Style.RESET_ALL}"


def print_server_banner(host: str = "0.0.0.0", port: int = 8080, color: str | None = "cyan") -> None:
    """
    Prints the banner and welcome message for server mode.

    Args:
        host: The host the server is running on.
        port: The port the server is running on.
        color: The color to apply to the banner.
    """
    print(get_colored_banner(BANNER.format(version=__version__), color), file=sys.stderr)
    print(get_colored_banner(f"Starting server on http://{host}:{port}", "green"), file=sys.stderr)
    print(get_colored_banner(SERVER_WELCOME, "green"), file=sys.stderr)
