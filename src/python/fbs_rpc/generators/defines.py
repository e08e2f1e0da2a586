"""
Formatters over a parsed RpcService.

Both hold a reference to the service and only read from it. They produce
plain data; wrapping it into a target language is left to the generators.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

from ..models import RpcService
from .base import to_constant_name, to_snake


class RpcMethodDefines:
    """(CONSTANT_NAME, method_name) for every method, in declaration order."""

    def __init__(self, service: RpcService):
        self._service = service

    @property
    def service(self) -> RpcService:
        return self._service

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        for method in self._service.methods:
            yield to_constant_name(method.name), method.name

    def __len__(self):
        return len(self._service.methods)

    def __str__(self):
        return "\n".join(f"{const} = {name!r}" for const, name in self)


@dataclass(frozen=True)
class ImplDefine:
    constant_name: str
    method_name: str
    handler_name: str
    argument_types: Tuple[str, ...]
    return_type: str


class RpcServiceImplDefines:
    """Handler signatures an implementation of the service has to provide."""

    def __init__(self, service: RpcService):
        self._service = service

    @property
    def service(self) -> RpcService:
        return self._service

    def __iter__(self) -> Iterator[ImplDefine]:
        for method in self._service.methods:
            # `foo()` parses to a single empty token, which is not an argument
            arg_types = tuple(a.strip() for a in method.arguments if a.strip())
            yield ImplDefine(
                to_constant_name(method.name),
                method.name,
                to_snake(method.name),
                arg_types,
                method.return_type.strip(),
            )

    def __len__(self):
        return len(self._service.methods)
