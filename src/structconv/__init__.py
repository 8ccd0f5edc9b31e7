"""structconv — bind loosely-typed key/value data into dataclass records."""

from structconv.domain.casing import identity, to_lower_snake, to_upper_snake
from structconv.domain.errors import DecodeContractError, DecodeError, DecodeReport, FieldError
from structconv.domain.options import DecodeOptions
from structconv.domain.types import (
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    Uint,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
)
from structconv.services.decode import decode_map, decode_string_map
from structconv.services.env import decode_env
from structconv.services.urlencoded import decode_form, decode_query_params

__version__ = "0.1.0"

__all__ = [
    "DecodeContractError",
    "DecodeError",
    "DecodeOptions",
    "DecodeReport",
    "FieldError",
    "Float32",
    "Float64",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Uint",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "__version__",
    "decode_env",
    "decode_form",
    "decode_map",
    "decode_query_params",
    "decode_string_map",
    "identity",
    "to_lower_snake",
    "to_upper_snake",
]
