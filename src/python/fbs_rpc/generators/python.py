import os

from .base import AbstractGenerator, to_identifier, to_pascal
from .defines import RpcMethodDefines, RpcServiceImplDefines
from ..models import RpcService


class PythonGenerator(AbstractGenerator):
    def generate(self, services: list[RpcService], output_dir: str = "build/generated") -> dict[str, str]:
        self._check(services)
        lines = [
            "# Generated by fbs-rpc. Do not edit.",
            "from typing import Protocol",
            "",
        ]

        for svc in services:
            lines.append(f"# --- rpc_service {svc.name} ---")
            lines.append(self._generate_constants(svc))
            lines.append("")
            lines.append(self._generate_protocol(svc))
            lines.append("")

        return {os.path.join(output_dir, "python", "rpc_defines.py"): "\n".join(lines)}

    def _generate_constants(self, svc: RpcService) -> str:
        lines = [f"class {to_identifier(to_pascal(svc.name))}Methods:"]
        defines = RpcMethodDefines(svc)
        if not len(defines):
            lines.append("    pass")
        for const_name, method_name in defines:
            lines.append(f"    {to_identifier(const_name)} = {method_name!r}")
        return "\n".join(lines)

    def _generate_protocol(self, svc: RpcService) -> str:
        lines = [f"class {to_identifier(to_pascal(svc.name))}Provider(Protocol):"]
        impl = RpcServiceImplDefines(svc)
        if not len(impl):
            lines.append("    pass")
        for d in impl:
            params = "".join(f", arg{i}: {t!r}" for i, t in enumerate(d.argument_types))
            ret = f" -> {d.return_type!r}" if d.return_type else " -> None"
            lines.append(f"    def {to_identifier(d.handler_name)}(self{params}){ret}: ...")
        return "\n".join(lines)
