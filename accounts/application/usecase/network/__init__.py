"""Social network use cases."""

from .attach import AttachNetworkUseCase, NetworkRequest
from .auth import NetworkAuthRequest, NetworkAuthResponse, NetworkAuthUseCase
from .detach import DetachNetworkUseCase

__all__ = [
    "AttachNetworkUseCase",
    "DetachNetworkUseCase",
    "NetworkAuthRequest",
    "NetworkAuthResponse",
    "NetworkAuthUseCase",
    "NetworkRequest",
]
