"""Constants used in the project."""

import os
from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    MISMATCH = 1
    WARNINGS = 2


class VersionSources(Enum):
    """Places a Node.js runtime version can be declared.

    Args:
        Enum (string): Source selector values accepted on the command line.
    """

    ENGINES = "engines"
    VOLTA = "volta"
    NVMRC = "nvmrc"
    NODE_VERSION = "node-version"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    PROG_NAME = "check-node-types"
    VERSION = "1.0.0"
    TYPES_PACKAGE = "@types/node"
    PACKAGE_JSON_FILE = "package.json"
    NVMRC_FILE = ".nvmrc"
    NODE_VERSION_FILE = ".node-version"
    SUPPORTED_SOURCES = [
        VersionSources.ENGINES.value,
        VersionSources.VOLTA.value,
        VersionSources.NVMRC.value,
        VersionSources.NODE_VERSION.value,
    ]
    DEFAULT_SOURCE = VersionSources.ENGINES.value
    SOURCE_LABELS = {
        VersionSources.ENGINES.value: "engines.node",
        VersionSources.VOLTA.value: "volta.node",
        VersionSources.NVMRC.value: NVMRC_FILE,
        VersionSources.NODE_VERSION.value: NODE_VERSION_FILE,
    }
    ENGINES_FIX_HINT = 'Add "engines": { "node": ">=XX" } to your package.json.'
    INSTALL_FIX_TEMPLATE = "npm install -D @types/node@^{major}"
    # semver.coerce caps each numeric part at 16 digits
    MAX_COERCE_DIGITS = 16

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVEL_ENV = "CHECK_NODE_TYPES_LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "WARNING"
    NO_COLOR_ENV = "NO_COLOR"

    CONFIG_FILE_CANDIDATES = [
        ".check-node-types.yml",
        ".check-node-types.yaml",
    ]


def default_config_paths():
    """Return the config file locations searched when --config is not given."""
    paths = list(Constants.CONFIG_FILE_CANDIDATES)
    xdg_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(
        os.path.expanduser("~"), ".config"
    )
    paths.append(os.path.join(xdg_home, Constants.PROG_NAME, "config.yml"))
    return paths
