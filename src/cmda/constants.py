# topmark:header:start
#
#   project      : CMDA
#   file         : constants.py
#   file_relpath : src/cmda/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CMDA Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    CMDA_VERSION: str = get_version("cmda")
except PackageNotFoundError:  # running from a source checkout
    CMDA_VERSION = "0.0.0"

# Output artifact naming: <prefix><sequence number><suffix>
CMODEL_PREFIX: Final[str] = "cmodel-"
MEMBER_PREFIX: Final[str] = "cmodel-"
MEMBER_SUFFIX: Final[str] = ".members.txt"

DEFAULT_ENCODING: Final[str] = "UTF-8"

DEFAULT_CMODEL_PID_PREFIX: Final[str] = "changeme:CModel"
DEFAULT_CMODEL_LABEL_PREFIX: Final[str] = "Content Model"
DEFAULT_BMECH_PID_PREFIX: Final[str] = "changeme:BMech"

ENV_LOG_LEVEL: Final[str] = "CMDA_LOG_LEVEL"
