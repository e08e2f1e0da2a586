import json
import os

from .base import AbstractGenerator, to_identifier, to_pascal, to_snake
from .defines import RpcMethodDefines, RpcServiceImplDefines
from ..models import RpcService


class CppGenerator(AbstractGenerator):
    def generate(self, services: list[RpcService], output_dir: str = "build/generated") -> dict[str, str]:
        self._check(services)
        lines = []
        lines.append("// Generated by fbs-rpc. Do not edit.")
        lines.append("#pragma once")
        lines.append("")
        lines.append("namespace generated {")
        lines.append("")

        for svc in services:
            lines.append(f"// rpc_service {svc.name}")
            lines.append(f"namespace {to_identifier(to_snake(svc.name))} {{")
            for const_name, method_name in RpcMethodDefines(svc):
                lines.append(f"    constexpr const char* {to_identifier(const_name)} = {json.dumps(method_name)};")
            lines.append("}")
            lines.append("")

            # Abstract provider
            lines.append(f"class {to_identifier(to_pascal(svc.name))}Provider {{")
            lines.append("public:")
            lines.append(f"    virtual ~{to_identifier(to_pascal(svc.name))}Provider() = default;")
            for d in RpcServiceImplDefines(svc):
                params = ", ".join(f"const {t}& arg{i}" for i, t in enumerate(d.argument_types))
                ret = d.return_type or "void"
                lines.append(f"    virtual {ret} {to_identifier(d.handler_name)}({params}) = 0;")
            lines.append("};")
            lines.append("")

        lines.append("} // namespace generated")
        return {os.path.join(output_dir, "cpp", "rpc_defines.h"): "\n".join(lines)}
