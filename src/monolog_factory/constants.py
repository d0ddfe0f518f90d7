"""
Application-wide constants for monolog-factory.

Names of the configuration sources and the limits applied while parsing
configuration documents.
"""

# Configuration discovery
ENV_CONFIG_VAR = "MONOLOG_CFG"
ENV_INCLUDE_PATH_VAR = "MONOLOG_INCLUDE_PATH"
CONFIG_SETTING_KEY = "monolog.config"
DEFAULT_CONFIG_FILENAME = "monolog.cfg"

# Default logger channel
DEFAULT_LOGGER_NAME = "monolog"

# JSON parsing limits
MAX_JSON_DEPTH = 512

# Processor defaults
DEFAULT_UID_LENGTH = 7
MAX_UID_LENGTH = 32

# Console formatting
CONSOLE_LOG_FORMAT = "%(asctime)s [%(levelname)8s] %(name)s: %(message)s"
CONSOLE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
