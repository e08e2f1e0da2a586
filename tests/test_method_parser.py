import unittest

from fbs_rpc.errors import InvalidMethodArgs, NoReturnType
from fbs_rpc.models import RpcMethod
from fbs_rpc.parser import parse_method


class TestParseMethod(unittest.TestCase):
    def test_two_arguments(self):
        method = parse_method("name(a, b): T;")
        self.assertEqual(method, RpcMethod("name", ("a", " b"), "T"))

    def test_argument_tokens_are_not_trimmed(self):
        method = parse_method("Store( Monster , Stat ):Result;")
        # Only the segment as a whole is trimmed, inner tokens stay verbatim
        self.assertEqual(method.arguments, ("Monster ", " Stat "))

    def test_zero_arguments_gives_single_empty_token(self):
        method = parse_method("bar(): int;")
        self.assertEqual(method.arguments, ("",))
        self.assertEqual(method.return_type, "int")

    def test_semicolon_is_optional(self):
        self.assertEqual(parse_method("Ping(Req): Pong").return_type, "Pong")

    def test_only_one_semicolon_stripped(self):
        self.assertEqual(parse_method("Ping(Req): Pong;;").return_type, "Pong;")

    def test_name_is_trimmed(self):
        self.assertEqual(parse_method("  Ping  (Req): Pong;").name, "Ping")

    def test_whitespace_before_colon(self):
        method = parse_method("Ping(Req)   : Pong;")
        self.assertEqual(method.arguments, ("Req",))

    def test_return_type_keeps_everything_after_first_colon(self):
        self.assertEqual(parse_method("Get(Key): ns::Value;").return_type, "ns::Value")

    def test_no_return_type(self):
        with self.assertRaises(NoReturnType) as ctx:
            parse_method("Ping(Req);")
        self.assertEqual(ctx.exception.line, "Ping(Req);")

    def test_empty_line_has_no_return_type(self):
        with self.assertRaises(NoReturnType) as ctx:
            parse_method("")
        self.assertEqual(ctx.exception, NoReturnType(""))

    def test_no_opening_paren(self):
        with self.assertRaises(InvalidMethodArgs) as ctx:
            parse_method("Ping Req: Pong;")
        self.assertEqual(ctx.exception.line, "Ping Req")

    def test_no_closing_paren(self):
        with self.assertRaises(InvalidMethodArgs) as ctx:
            parse_method("Ping(Req: Pong;")
        self.assertEqual(ctx.exception.line, "Ping(Req")

    def test_trailing_text_after_paren(self):
        with self.assertRaises(InvalidMethodArgs):
            parse_method("Ping(Req) extra: Pong;")

    def test_pure(self):
        line = "Retrieve(Stat, Filter): Monster;"
        self.assertEqual(parse_method(line), parse_method(line))


class TestParseErrorValues(unittest.TestCase):
    def test_equality_by_kind_and_line(self):
        self.assertEqual(NoReturnType("x"), NoReturnType("x"))
        self.assertNotEqual(NoReturnType("x"), InvalidMethodArgs("x"))
        self.assertNotEqual(NoReturnType("x"), NoReturnType("y"))

    def test_lineno_does_not_affect_equality(self):
        self.assertEqual(NoReturnType("x", lineno=3), NoReturnType("x", lineno=9))
        self.assertEqual(hash(NoReturnType("x", lineno=3)), hash(NoReturnType("x")))

    def test_str_includes_lineno(self):
        self.assertEqual(str(InvalidMethodArgs("Ping", lineno=4)), "line 4: invalid method arguments in 'Ping'")


if __name__ == '__main__':
    unittest.main()
