"""Version information for openie-wrapper."""

__version__ = "0.2.0"
__version_info__ = tuple(int(i) for i in __version__.split("."))

__title__ = "openie-wrapper"
__description__ = "Command-line wrapper around the Stanford OpenIE extraction engine"
__author__ = "OpenIE Wrapper Team"
__license__ = "ISC"
