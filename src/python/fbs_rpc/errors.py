from typing import Optional


class ParseError(Exception):
    """
    Base class for rpc_service parse failures.

    `line` is the offending raw text (where one applies) and takes part in
    equality. `lineno` is the 1-based position of that line in the scanned
    source; it is filled in by ServiceParser and ignored by equality.
    """

    def __init__(self, line: Optional[str] = None, lineno: Optional[int] = None):
        super().__init__(line)
        self.line = line
        self.lineno = lineno

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.line == other.line

    def __hash__(self):
        return hash((type(self).__name__, self.line))

    def __repr__(self):
        return f"{type(self).__name__}({self.line!r})"

    def __str__(self):
        where = f"line {self.lineno}: " if self.lineno is not None else ""
        return f"{where}{self.describe()}"

    def describe(self) -> str:
        return "parse error"


class NoStartingBracket(ParseError):
    """rpc_service header without an opening '{' on the same line."""

    def describe(self) -> str:
        return "rpc_service definition has no opening bracket"


class NoReturnType(ParseError):
    def describe(self) -> str:
        return f"cannot determine return type of {self.line!r}"


class InvalidMethodArgs(ParseError):
    def describe(self) -> str:
        return f"invalid method arguments in {self.line!r}"


class UnterminatedBlock(ParseError):
    """Input ended inside a service block. Only produced in strict mode; `line` holds the service name."""

    def describe(self) -> str:
        return f"rpc_service {self.line!r} is missing its closing '}}'"
