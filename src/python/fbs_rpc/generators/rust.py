import json
import os

from .base import AbstractGenerator, to_identifier, to_pascal, to_snake
from .defines import RpcMethodDefines, RpcServiceImplDefines
from ..models import RpcService


class RustGenerator(AbstractGenerator):
    def generate(self, services: list[RpcService], output_dir: str = "build/generated") -> dict[str, str]:
        self._check(services)
        lines = [
            "// Generated by fbs-rpc. Do not edit.",
            "",
        ]

        for svc in services:
            lines.append(f"// --- rpc_service: {svc.name} ---")
            lines.append(self._generate_method_defines(svc))
            lines.append("")
            lines.append(self._generate_provider_trait(svc))
            lines.append("")

        return {os.path.join(output_dir, "rust", "rpc_defines.rs"): "\n".join(lines)}

    def _generate_method_defines(self, svc: RpcService) -> str:
        lines = []
        lines.append("#[allow(dead_code)]")
        lines.append(f"pub mod {to_identifier(to_snake(svc.name))} {{")
        for const_name, method_name in RpcMethodDefines(svc):
            lines.append(f"    pub const {to_identifier(const_name)}: &str = {json.dumps(method_name)};")
        lines.append("}")
        return "\n".join(lines)

    def _generate_provider_trait(self, svc: RpcService) -> str:
        lines = []
        lines.append("#[allow(dead_code)]")
        lines.append(f"pub trait {to_identifier(to_pascal(svc.name))}Provider: Send + Sync {{")
        for d in RpcServiceImplDefines(svc):
            params = "".join(f", arg{i}: {t}" for i, t in enumerate(d.argument_types))
            ret_str = f" -> {d.return_type}" if d.return_type else ""
            lines.append(f"    fn {to_identifier(d.handler_name)}(&self{params}){ret_str};")
        lines.append("}")
        return "\n".join(lines)
