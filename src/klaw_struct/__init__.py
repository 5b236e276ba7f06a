"""klaw-struct: Result/Option types, a fluent List, and struct validation.

Flat imports (preferred):
    from klaw_struct import Result, Ok, Err, Option, Some, Nothing
    from klaw_struct import object_, array, string, number, defaulted, parse

Submodule imports (for organization):
    from klaw_struct.structs import object_, ErrorKind
    from klaw_struct.collection import List
    from klaw_struct import iterable, guards
"""

from klaw_struct import guards, iterable, numeric

# Configuration
from klaw_struct._config import StructConfig, get_config, init

# Logging
from klaw_struct._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

# Container
from klaw_struct.collection import List

# Guards
from klaw_struct.guards import (
    is_array,
    is_boolean,
    is_date,
    is_function,
    is_integer,
    is_none,
    is_number,
    is_object,
    is_present,
    is_primitive,
    is_regexp,
    is_string,
    type_of,
)

# Option types
from klaw_struct.option import Nothing, NothingType, Option, Some, from_optional

# Result types
from klaw_struct.result import Err, Ok, Result, collect

# Structs
from klaw_struct.structs import (
    AssignmentError,
    ErrorKind,
    GenericError,
    Shape,
    Struct,
    StructError,
    StructValidationError,
    ValidationError,
    array,
    as_date,
    as_number,
    as_string,
    boolean,
    create_error,
    date,
    defaulted,
    enums,
    is_valid,
    list_,
    number,
    object_,
    parse,
    string,
    unknown,
)

__all__ = [
    # Structs
    'AssignmentError',
    # Result types
    'Err',
    'ErrorKind',
    'GenericError',
    # Container
    'List',
    # Option types
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Shape',
    'Some',
    'Struct',
    # Configuration
    'StructConfig',
    'StructError',
    'StructValidationError',
    'ValidationError',
    # Logging
    'add_log_hook',
    'array',
    'as_date',
    'as_number',
    'as_string',
    'boolean',
    'clear_log_hooks',
    'collect',
    'configure_logging',
    'create_error',
    'date',
    'defaulted',
    'enums',
    'from_optional',
    'get_config',
    'get_logger',
    # Submodules
    'guards',
    'init',
    # Guards
    'is_array',
    'is_boolean',
    'is_date',
    'is_function',
    'is_integer',
    'is_none',
    'is_number',
    'is_object',
    'is_present',
    'is_primitive',
    'is_regexp',
    'is_string',
    'is_valid',
    'iterable',
    'list_',
    'number',
    'numeric',
    'object_',
    'parse',
    'remove_log_hook',
    'string',
    'type_of',
    'unknown',
]
