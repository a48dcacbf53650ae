"""HTTP transport for the Aztec REST API."""

from aztec_node.transport.client import AztecClient, handle_api_response
from aztec_node.transport.helpers import (
    build_query_params,
    format_hex_string,
    parse_hex_string,
    validate_address,
    validate_key,
    wei_to_eth,
    eth_to_wei,
)

__all__ = [
    "AztecClient",
    "handle_api_response",
    "build_query_params",
    "format_hex_string",
    "parse_hex_string",
    "validate_address",
    "validate_key",
    "wei_to_eth",
    "eth_to_wei",
]
