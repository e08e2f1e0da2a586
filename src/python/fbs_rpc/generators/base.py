import re
from typing import Dict, List

from ..models import RpcService

# Word boundaries: "getUser" -> "get_User", "HTTPGet" -> "HTTP_Get", "v2Api" -> "v2_Api"
_BOUNDARY_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_BOUNDARY_ACRONYM = re.compile(r"([A-Z]+)([A-Z][a-z])")
_SEPARATORS = re.compile(r"[\s\-.]+")
_INVALID_IDENT = re.compile(r"[^0-9A-Za-z_]")


class GenerationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("\n".join(errors))
        self.errors = errors


def _split_words(name: str) -> List[str]:
    name = _SEPARATORS.sub("_", name.strip())
    name = _BOUNDARY_ACRONYM.sub(r"\1_\2", name)
    name = _BOUNDARY_LOWER_UPPER.sub(r"\1_\2", name)
    return [p for p in name.split("_") if p]


def to_constant_name(name: str) -> str:
    """`getUser` / `get_user` / `GetUser` -> `GET_USER`."""
    return "_".join(_split_words(name)).upper()


def to_snake(name: str) -> str:
    return "_".join(_split_words(name)).lower()


def to_pascal(name: str) -> str:
    return "".join(p[:1].upper() + p[1:] for p in _split_words(name))


def to_identifier(name: str) -> str:
    """Make `name` usable as an identifier in every target: `$get` -> `_get`, `2fa` -> `_2fa`."""
    name = _INVALID_IDENT.sub("_", name)
    if name[:1].isdigit():
        name = "_" + name
    return name


def check_services(services: List[RpcService]) -> List[str]:
    """
    Returns the reasons the services cannot be emitted as distinct identifiers.
    Empty list implies every service, constant and handler name is non-empty and unique.
    """
    errors = []
    modules: Dict[str, str] = {}
    providers: Dict[str, str] = {}

    for svc in services:
        module = to_identifier(to_snake(svc.name))
        provider = to_identifier(to_pascal(svc.name))
        if not module:
            errors.append(f"rpc_service {svc.name!r} has no usable name")
        elif module in modules or provider in providers:
            other = modules.get(module) or providers.get(provider)
            errors.append(f"rpc_service {svc.name!r} clashes with rpc_service {other!r}")
        else:
            modules[module] = svc.name
            providers[provider] = svc.name

        # Handler names are the lower-case form of the same words, so unique constants imply unique handlers
        constants: Dict[str, str] = {}
        for method in svc.methods:
            const = to_identifier(to_constant_name(method.name))
            if not const:
                errors.append(f"rpc_service {svc.name}: method {method.name!r} has no usable name")
            elif const in constants:
                errors.append(f"rpc_service {svc.name}: methods {constants[const]!r} and {method.name!r} "
                              f"both map to {const}")
            else:
                constants[const] = method.name
    return errors


class AbstractGenerator:
    def generate(self, services: List[RpcService], output_dir: str = "build/generated") -> Dict[str, str]:
        raise NotImplementedError

    def _check(self, services: List[RpcService]):
        errors = check_services(services)
        if errors:
            raise GenerationError(errors)
