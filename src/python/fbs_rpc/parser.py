"""
Line-based rpc_service scanner.

Pulls lines from any iterable (file object, list, generator) and returns one
RpcService or one ParseError per `rpc_service` block. Everything outside a
block is ignored, so a full schema file can be fed in unchanged:

    rpc_service MonsterStorage {
      Store(Monster):Stat;
      Retrieve(Stat):Monster;
    }
"""

import io
import logging
from typing import Iterable, Iterator, List, Optional, Union

from .errors import ParseError, NoStartingBracket, NoReturnType, InvalidMethodArgs, UnterminatedBlock
from .models import RpcMethod, RpcService

logger = logging.getLogger("fbs_rpc.parser")

SERVICE_KEYWORD = "rpc_service"

ParseResult = Union[RpcService, ParseError]


def parse_method(line: str) -> RpcMethod:
    """
    Parse one method signature of the form `name(arg1, arg2): ReturnType;`.

    Argument tokens are kept exactly as split on ',' (no per-token trimming),
    and `name()` gives a single empty argument.

    Raises:
        NoReturnType: no ':' in the line (carries the whole line)
        InvalidMethodArgs: no '(' or no closing ')' (carries the text before ':')
    """
    method_args, sep, return_type = line.partition(":")
    if not sep:
        raise NoReturnType(line)

    return_type = return_type.strip()
    if return_type.endswith(";"):
        return_type = return_type[:-1]

    name, sep, args = method_args.partition("(")
    if not sep:
        raise InvalidMethodArgs(method_args)

    args = args.strip()
    if not args.endswith(")"):
        raise InvalidMethodArgs(method_args)
    args = args[:-1]

    return RpcMethod(name.strip(), args.split(","), return_type)


class ServiceParser:
    """
    Single-use iterator over the rpc_service blocks of a line source.

    Each step returns an RpcService, or a ParseError instance when the block
    is malformed. Errors are returned rather than raised so that iteration
    can go on: the next step resumes right after the line that failed.
    """

    def __init__(self, lines: Union[str, Iterable[str]], strict: bool = False):
        if isinstance(lines, str):
            # Same line breaks as a text-mode file: \n, \r\n and \r only
            lines = io.StringIO(lines, newline=None)
        self._lines: Iterator[str] = iter(lines)
        self.strict = strict
        self.lines_consumed = 0

    def __iter__(self) -> "ServiceParser":
        return self

    def __next__(self) -> ParseResult:
        while True:
            line = self._next_line()
            if line is None:
                raise StopIteration
            header = line.strip()
            if header.startswith(SERVICE_KEYWORD):
                return self._parse_block(header)

    def _next_line(self) -> Optional[str]:
        try:
            line = next(self._lines)
        except StopIteration:
            return None
        self.lines_consumed += 1
        return line

    def _parse_block(self, header: str) -> ParseResult:
        header_lineno = self.lines_consumed
        name, sep, _ = header[len(SERVICE_KEYWORD):].partition("{")
        if not sep:
            logger.debug(f"Line {header_lineno}: rpc_service without opening bracket: {header!r}")
            return NoStartingBracket(header, lineno=header_lineno)

        name = name.strip()
        methods: List[RpcMethod] = []
        while True:
            line = self._next_line()
            if line is None:
                if self.strict:
                    return UnterminatedBlock(name, lineno=header_lineno)
                logger.debug(f"rpc_service {name} ends with the input, no closing bracket")
                break

            line = line.strip()
            if line == "}":
                break

            try:
                methods.append(parse_method(line))
            except ParseError as e:
                e.lineno = self.lines_consumed
                logger.debug(f"Abandoning rpc_service {name}: {e}")
                return e

        logger.debug(f"Parsed rpc_service {name} ({len(methods)} methods)")
        return RpcService(name, methods)


def parse_services(lines: Union[str, Iterable[str]], strict: bool = False) -> ServiceParser:
    """Return a fresh scanner over `lines`."""
    return ServiceParser(lines, strict=strict)


def load_services(lines: Union[str, Iterable[str]], strict: bool = False) -> List[RpcService]:
    """Collect every service, raising the first ParseError encountered."""
    services = []
    for result in ServiceParser(lines, strict=strict):
        if isinstance(result, ParseError):
            raise result
        services.append(result)
    return services
