"""Business logic services.

This package contains request validation and the client used to forward
validated CEPs to the resolution service.
"""

from gateway.src.services.cep_gateway import CepGateway, parse_cep_request
from gateway.src.services.resolution_client import ResolutionClient, extract_error_message

__all__ = ["CepGateway", "ResolutionClient", "extract_error_message", "parse_cep_request"]
