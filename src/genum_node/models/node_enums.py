"""Resource and operation identifiers exposed by the node."""

from enum import Enum

CREDENTIAL_NAME = "genumApi"


class Resource(str, Enum):
    PROMPT = "prompt"


class Operation(str, Enum):
    GET_ALL = "getAll"
    RUN = "run"
