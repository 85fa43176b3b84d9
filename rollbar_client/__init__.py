"""Async error reporting client for the Rollbar item API."""

from rollbar_client.client import Client
from rollbar_client.core.config import DEFAULT_ENDPOINT, ClientConfig
from rollbar_client.core.errors import (
    ConfigurationError,
    DecodeError,
    EncodingError,
    RemoteRejectionError,
    RequestError,
    RollbarError,
    TransportError,
)
from rollbar_client.core.logger import Logger, NullLogger
from rollbar_client.models.payload import Level, Payload
from rollbar_client.models.response import Response, Result
from rollbar_client.services.payload import ErrorOptions, build_payload
from rollbar_client.services.stack import Stack, StackFrame, capture_stack, fingerprint
from rollbar_client.version import VERSION as __version__

__all__ = [
    "__version__",
    "Client",
    "ClientConfig",
    "DEFAULT_ENDPOINT",
    "ErrorOptions",
    "Level",
    "Payload",
    "Response",
    "Result",
    "Stack",
    "StackFrame",
    "build_payload",
    "capture_stack",
    "fingerprint",
    "Logger",
    "NullLogger",
    "RollbarError",
    "ConfigurationError",
    "EncodingError",
    "RequestError",
    "TransportError",
    "RemoteRejectionError",
    "DecodeError",
]
