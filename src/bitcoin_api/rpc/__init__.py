from bitcoin_api.rpc.jsonrpc import (
    RpcRequest,
    RpcResponse,
    build_rpc_error,
    decode_response,
    encode_request,
    make_request,
)

__all__ = [
    "RpcRequest",
    "RpcResponse",
    "make_request",
    "encode_request",
    "decode_response",
    "build_rpc_error",
]
