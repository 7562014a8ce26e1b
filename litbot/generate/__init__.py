# Generator package: persona + model clients.

from .generator import ChatGenerator, load_config
from .types import Message, ChatResponse, ModelParams
from .clients.echo_dev_client import EchoDevClient
from .clients.gateway_client import GatewayClient

__all__ = [
    "ChatGenerator",
    "load_config",
    "Message",
    "ChatResponse",
    "ModelParams",
    "EchoDevClient",
    "GatewayClient",
]
