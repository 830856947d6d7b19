"""assertify: uniform value/optional/result access over any lookup.

Wrap a function whose result may be None, an optional container, a result
container, or an awaitable of those, and get three normalized accessors.

Flat imports (preferred):
    from assertify import create_assertion, assertion
    from assertify import AssertionFailedError, FailureValueError

Submodule imports (for organization):
    from assertify.classify import classify
    from assertify.shapes import Plain, ResultFailure
    from assertify.capabilities import ReturnsResult, RustStyleResult
"""

# Factory
from assertify.assertion import Assertion, assertion, create_assertion

# Capabilities
from assertify.capabilities import (
    OptionalCapability,
    ResultCapability,
    ReturnsIOResult,
    ReturnsMaybe,
    ReturnsResult,
    RustStyleOption,
    RustStyleResult,
)

# Classification
from assertify.classify import classify

# Configuration
from assertify._config import AssertionConfig, get_config, init

# Deferred threading
from assertify.deferred import is_deferred, then

# Errors
from assertify.errors import (
    DEFAULT_ERROR_MESSAGE,
    AssertionFailed,
    AssertionFailedError,
    FailureValueError,
    default_error_factory,
)

# Logging
from assertify._logging import configure_logging, get_logger

# Shapes
from assertify.shapes import (
    Nullish,
    OptionalAbsent,
    OptionalPresent,
    Plain,
    ResultFailure,
    ResultSuccess,
    Shape,
)

__all__ = [
    'DEFAULT_ERROR_MESSAGE',
    # Factory
    'Assertion',
    # Configuration
    'AssertionConfig',
    # Errors
    'AssertionFailed',
    'AssertionFailedError',
    'FailureValueError',
    # Shapes
    'Nullish',
    # Capabilities
    'OptionalCapability',
    'OptionalAbsent',
    'OptionalPresent',
    'Plain',
    'ResultCapability',
    'ResultFailure',
    'ResultSuccess',
    'ReturnsIOResult',
    'ReturnsMaybe',
    'ReturnsResult',
    'RustStyleOption',
    'RustStyleResult',
    'Shape',
    'assertion',
    # Classification
    'classify',
    # Logging
    'configure_logging',
    'create_assertion',
    'default_error_factory',
    'get_config',
    'get_logger',
    'init',
    # Deferred threading
    'is_deferred',
    'then',
]
