from bitcoin_api.transport.base import HttpReply, Transport
from bitcoin_api.transport.http import HttpxTransport, parse_endpoint_url

__all__ = ["HttpReply", "Transport", "HttpxTransport", "parse_endpoint_url"]
