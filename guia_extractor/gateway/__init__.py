from guia_extractor.gateway.base import BaseModelGateway
from guia_extractor.gateway.factory import GatewayFactory

__all__ = ["BaseModelGateway", "GatewayFactory"]
