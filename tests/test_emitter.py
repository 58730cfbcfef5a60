import unittest

from argen.config.options import GenerationOptions
from argen.core.emitter import (
    NamedEmitter,
    PositionalEmitter,
    c_char_literal,
    c_string_literal,
    convert_token,
    render_default,
)
from argen.models import CType, NamedArgument, PositionalArgument


def _named(options=None, **fields):
    values = {"c_var": "port", "c_type": "int32", "name": "port"}
    values.update(fields)
    return NamedEmitter(NamedArgument(**values), options)


class TestTypeTable(unittest.TestCase):
    def test_token_conversion(self):
        self.assertEqual(convert_token(CType.INT32, "argv[++i]"), "atoi(argv[++i])")
        self.assertEqual(convert_token(CType.STRING, "argv[++i]"), "argv[++i]")
        self.assertEqual(convert_token(CType.CHAR, "argv[++i]"), "argv[++i][0]")

    def test_default_rendering(self):
        self.assertEqual(render_default(CType.INT32, "8080"), "8080")
        self.assertEqual(render_default(CType.INT32, "+8080"), "8080")
        self.assertEqual(render_default(CType.INT32, "007"), "7")
        self.assertEqual(render_default(CType.INT32, "-12"), "-12")
        self.assertEqual(render_default(CType.STRING, "localhost"), '"localhost"')
        self.assertEqual(render_default(CType.CHAR, "x"), "'x'")

    def test_literals_are_escaped(self):
        self.assertEqual(c_string_literal('say "hi"\n'), '"say \\"hi\\"\\n"')
        self.assertEqual(c_string_literal("C:\\tmp"), '"C:\\\\tmp"')
        self.assertEqual(c_char_literal("'"), "'\\''")
        self.assertEqual(c_char_literal("\\"), "'\\\\'")


class TestNamedEmitter(unittest.TestCase):
    def test_declarations(self):
        self.assertEqual(_named().declare_variable(), "\tint32_t port = 0;\n")
        self.assertEqual(
            _named(c_var="host", c_type="char*").declare_variable(), "\tchar *host = NULL;\n"
        )
        self.assertEqual(
            _named(c_var="mode", c_type="char").declare_variable(), "\tchar mode = '\\0';\n"
        )
        self.assertEqual(_named().declare_seen_flag(), "\tbool port__isset = false;\n")

    def test_pointer_parameter_and_address(self):
        self.assertEqual(_named().pointer_parameter(), "int32_t *port")
        self.assertEqual(_named(c_var="host", c_type="char*").pointer_parameter(), "char **host")
        self.assertEqual(_named().address_argument(), "&port")

    def test_match_fragment_checks_long_name_only(self):
        fragment = _named(short="p", aliases=["listen"]).match_fragment()

        self.assertEqual(
            fragment,
            '\t\tif (!strcmp(argv[i], "--port") && i+1<argc) {\n'
            "\t\t\t*port = atoi(argv[++i]);\n"
            "\t\t\tport__isset = true;\n"
            "\t\t\targ_count += 2;\n"
            "\t\t}\n",
        )
        self.assertNotIn('"-p"', fragment)
        self.assertNotIn('"--listen"', fragment)

    def test_match_fragment_conversions(self):
        self.assertIn(
            "*host = argv[++i];", _named(c_var="host", c_type="char*", name="host").match_fragment()
        )
        self.assertIn(
            "*mode = argv[++i][0];", _named(c_var="mode", c_type="char", name="mode").match_fragment()
        )

    def test_match_fragment_with_aliases_enabled(self):
        options = GenerationOptions(match_aliases=True)
        fragment = _named(options, short="p", aliases=["listen"]).match_fragment()

        self.assertIn(
            '\t\tif ((!strcmp(argv[i], "--port") || !strcmp(argv[i], "-p") '
            '|| !strcmp(argv[i], "--listen")) && i+1<argc) {\n',
            fragment,
        )

    def test_match_fragment_skips_rest_of_loop_when_binding(self):
        options = GenerationOptions(bind_positionals=True)
        self.assertEqual(
            _named(options).match_fragment(),
            '\t\tif (!strcmp(argv[i], "--port") && i+1<argc) {\n'
            "\t\t\t*port = atoi(argv[++i]);\n"
            "\t\t\tport__isset = true;\n"
            "\t\t\targ_count += 2;\n"
            "\t\t\tcontinue;\n"
            "\t\t}\n",
        )

    def test_match_fragment_with_aliases_enabled_but_none_declared(self):
        options = GenerationOptions(match_aliases=True)
        self.assertEqual(_named(options).match_fragment(), _named().match_fragment())

    def test_required_exits_with_usage(self):
        self.assertEqual(
            _named(required=True).post_loop_fragment(),
            "\tif (!port__isset) {\n"
            "\t\tusage(argv[0]);\n"
            "\t\texit(1);\n"
            "\t}\n",
        )

    def test_required_takes_precedence_over_default(self):
        fragment = _named(required=True, default="8080").post_loop_fragment()
        self.assertIn("exit(1);", fragment)
        self.assertNotIn("8080", fragment)

    def test_default_assigned_when_unset(self):
        self.assertEqual(
            _named(c_var="host", c_type="char*", name="host", default="localhost").post_loop_fragment(),
            '\tif (!host__isset) {\n\t\t*host = "localhost";\n\t}\n',
        )
        self.assertIn("*port = 8080;", _named(default="8080").post_loop_fragment())
        self.assertIn(
            "*mode = 'r';", _named(c_var="mode", c_type="char", default="r").post_loop_fragment()
        )

    def test_optional_without_default_leaves_variable(self):
        fragment = _named(required=False).post_loop_fragment()
        self.assertEqual(fragment, "\tif (!port__isset) {\n\t}\n")


class TestPositionalEmitter(unittest.TestCase):
    def setUp(self):
        self.argument = PositionalArgument(c_var="infile", c_type="char*")

    def test_declaration(self):
        emitter = PositionalEmitter(self.argument, 0)
        self.assertEqual(emitter.declare_variable(), "\tchar *infile = NULL;\n")
        self.assertEqual(emitter.pointer_parameter(), "char **infile")

    def test_no_fragments_by_default(self):
        emitter = PositionalEmitter(self.argument, 0)
        self.assertEqual(emitter.match_fragment(), "")
        self.assertEqual(emitter.post_loop_fragment(), "")

    def test_binding_by_index(self):
        options = GenerationOptions(bind_positionals=True)
        emitter = PositionalEmitter(PositionalArgument(c_var="count", c_type="int32"), 2, options)

        self.assertEqual(
            emitter.match_fragment(),
            "\t\tif (i - arg_count - 1 == 2) {\n"
            "\t\t\t*count = atoi(argv[i]);\n"
            "\t\t}\n",
        )
        self.assertEqual(emitter.post_loop_fragment(), "")


if __name__ == "__main__":
    unittest.main()
