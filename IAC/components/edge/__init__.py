"""
Edge components for API routing.

Components:
- ApiGatewayComponent: HTTP API with Lambda proxy route to intake
"""

from IAC.components.edge.api_gateway import ApiGatewayComponent, ApiGatewayOutputs

__all__ = [
    "ApiGatewayComponent",
    "ApiGatewayOutputs",
]
