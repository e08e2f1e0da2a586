from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class RpcMethod:
    name: str
    arguments: Tuple[str, ...]  # raw tokens as split from the argument list
    return_type: str

    def __post_init__(self):
        # Accept any sequence but always store a tuple
        object.__setattr__(self, "arguments", tuple(self.arguments))


@dataclass(frozen=True)
class RpcService:
    name: str
    methods: Tuple[RpcMethod, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "methods", tuple(self.methods))

    def as_rpc_method_defines(self):
        """Formatter yielding (CONSTANT_NAME, method_name) for every method."""
        from .generators.defines import RpcMethodDefines
        return RpcMethodDefines(self)

    def as_rpc_service_impl_defines(self):
        """Formatter yielding the handler each implementation must provide, one per method."""
        from .generators.defines import RpcServiceImplDefines
        return RpcServiceImplDefines(self)
