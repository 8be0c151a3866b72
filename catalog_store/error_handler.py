"""Error handling utilities for the catalog store."""

import inspect
import logging
import traceback
from typing import Any, Callable, Optional, TypeVar, Union
from functools import wraps

from .exceptions import CatalogStoreError, ConfigurationError

# Configure logger
logger = logging.getLogger(__name__)

T = TypeVar('T')


def handle_errors(
    default_return: Any = None,
    exception_type: type = CatalogStoreError,
    log_level: int = logging.ERROR,
    reraise: bool = False
):
    """Decorator for consistent error handling across the package.

    Works on plain and ``async`` functions. ``ConfigurationError`` always
    propagates untouched: an unregistered collection or a bad setting is a
    programmer error and must surface immediately.
    """

    def _handle(func: Callable, error: Exception) -> Any:
        if isinstance(error, ConfigurationError):
            raise error
        if isinstance(error, CatalogStoreError):
            # Our custom errors - log with details
            logger.log(log_level, f"{func.__name__} failed: {error.message}", extra={
                'error_code': error.error_code,
                'details': error.details,
                'function': func.__name__
            })
            if reraise:
                raise error
            return default_return

        # Unexpected errors - wrap in our exception type
        error_msg = f"Unexpected error in {func.__name__}: {str(error)}"
        logger.log(log_level, error_msg, extra={
            'function': func.__name__,
            'original_error': str(error),
            'details': {},
            'traceback': traceback.format_exc()
        })
        if reraise:
            raise exception_type(
                message=error_msg,
                details={'original_error': str(error), 'function': func.__name__}
            ) from error
        return default_return

    def decorator(func: Callable[..., T]) -> Callable[..., Union[T, Any]]:
        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    return _handle(func, e)
            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                return _handle(func, e)
        return wrapper
    return decorator


def log_error(
    error: Exception,
    context: str,
    details: Optional[dict] = None,
    level: int = logging.ERROR
) -> None:
    """Log an error with consistent formatting."""
    if isinstance(error, CatalogStoreError):
        logger.log(level, f"{context}: {error.message}", extra={
            'error_code': error.error_code,
            'details': {**(error.details or {}), **(details or {})},
            'context': context
        })
    else:
        logger.log(level, f"{context}: {str(error)}", extra={
            'original_error': str(error),
            'details': details or {},
            'context': context,
            'traceback': traceback.format_exc()
        })


def safe_execute(
    func: Callable[[], T],
    context: str,
    default_return: Any = None,
    exception_type: type = CatalogStoreError
) -> Union[T, Any]:
    """Safely execute a function with error logging."""
    try:
        return func()
    except ConfigurationError:
        raise
    except CatalogStoreError as e:
        log_error(e, context)
        return default_return
    except Exception as e:
        wrapped_error = exception_type(
            message=f"Error in {context}: {str(e)}",
            details={'original_error': str(e)}
        )
        log_error(wrapped_error, context)
        return default_return


def validate_config(config_dict: dict, required_keys: list, context: str = "Configuration") -> None:
    """Validate configuration with detailed error messages."""
    missing_keys = [key for key in required_keys if key not in config_dict or config_dict[key] is None]

    if missing_keys:
        raise ConfigurationError(
            message=f"Missing required configuration keys: {', '.join(missing_keys)}",
            details={
                'missing_keys': missing_keys,
                'available_keys': list(config_dict.keys()),
                'context': context
            }
        )


def validate_choice(value: str, choices: tuple, name: str) -> str:
    """Reject a setting that is not one of the supported choices."""
    if value not in choices:
        raise ConfigurationError(
            message=f"Unsupported {name}: {value!r}",
            details={'value': value, 'choices': list(choices)}
        )
    return value
