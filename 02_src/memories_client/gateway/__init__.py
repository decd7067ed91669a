"""RPC gateway module."""

from .gateway import IRpcGateway, RpcGateway, classify_failure

__all__ = ["IRpcGateway", "RpcGateway", "classify_failure"]
