"""Per-argument C code fragments.

Each emitter turns one argument into the pieces of C it contributes to the
generated module. Fragments depend only on the argument itself (and its
index for positionals), so emitting is order-preserving by construction.

Inside ``parse_args`` every argument is reached through a pointer parameter
named after its C variable; ``<c_var>__isset`` tracks whether a named
argument appeared on the command line.
"""

from abc import ABC, abstractmethod
from typing import Optional

from argen.config.options import GenerationOptions
from argen.models.models import CType, NamedArgument, PositionalArgument

# Declarator templates, filled with the variable name (or "*name" for pointers)
_DECLARATORS = {
    CType.CHAR: "char {}",
    CType.STRING: "char *{}",
    CType.INT32: "int32_t {}",
}

# Value a variable holds until parse_args assigns it
_UNSET_VALUES = {
    CType.CHAR: "'\\0'",
    CType.STRING: "NULL",
    CType.INT32: "0",
}

_C_ESCAPES = {
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def c_string_literal(text: str) -> str:
    """Quote text as a C string literal"""
    escaped = "".join(_C_ESCAPES.get(ch, ch) for ch in text).replace('"', '\\"')
    return f'"{escaped}"'


def c_char_literal(text: str) -> str:
    """Quote text as a C character literal"""
    escaped = "".join(_C_ESCAPES.get(ch, ch) for ch in text).replace("'", "\\'")
    return f"'{escaped}'"


def declarator(data_type: CType, name: str) -> str:
    return _DECLARATORS[data_type].format(name)


def convert_token(data_type: CType, token: str) -> str:
    """C expression converting a command-line token to the variable's type"""
    if data_type is CType.INT32:
        return f"atoi({token})"
    if data_type is CType.STRING:
        return token
    if data_type is CType.CHAR:
        return f"{token}[0]"
    raise ValueError(f"Unsupported C type: {data_type}")


def render_default(data_type: CType, raw: str) -> str:
    """C literal for a default value given as raw text"""
    if data_type is CType.INT32:
        # decimal, so a leading zero never reads as octal
        return str(int(raw))
    if data_type is CType.STRING:
        return c_string_literal(raw)
    if data_type is CType.CHAR:
        return c_char_literal(raw)
    raise ValueError(f"Unsupported C type: {data_type}")


def seen_flag(c_var: str) -> str:
    return f"{c_var}__isset"


class ArgumentEmitter(ABC):
    """Fragments shared by every argument kind"""

    def __init__(self, argument, options: Optional[GenerationOptions] = None):
        self.argument = argument
        self.options = options or GenerationOptions()

    @property
    def c_var(self) -> str:
        return self.argument.c_var

    @property
    def data_type(self) -> CType:
        return self.argument.c_type

    def declare_variable(self) -> str:
        """Declaration inside main, initialised to the unset value"""
        return f"\t{declarator(self.data_type, self.c_var)} = {_UNSET_VALUES[self.data_type]};\n"

    def pointer_parameter(self) -> str:
        """Parameter of parse_args receiving the variable's address"""
        return declarator(self.data_type, f"*{self.c_var}")

    def address_argument(self) -> str:
        return f"&{self.c_var}"

    @abstractmethod
    def match_fragment(self) -> str:
        """Code inside the token loop"""
        pass

    @abstractmethod
    def post_loop_fragment(self) -> str:
        """Code after the token loops"""
        pass


class NamedEmitter(ArgumentEmitter):
    """Fragments for a --name flag argument"""

    argument: NamedArgument

    def declare_seen_flag(self) -> str:
        return f"\tbool {seen_flag(self.c_var)} = false;\n"

    def _token_test(self) -> str:
        if self.options.match_aliases:
            tokens = self.argument.flag_tokens
        else:
            tokens = [f"--{self.argument.name}"]

        tests = [f"!strcmp(argv[i], {c_string_literal(token)})" for token in tokens]
        if len(tests) == 1:
            return tests[0]
        return "(" + " || ".join(tests) + ")"

    def match_fragment(self) -> str:
        value = convert_token(self.data_type, "argv[++i]")
        code = f"\t\tif ({self._token_test()} && i+1<argc) {{\n"
        code += f"\t\t\t*{self.c_var} = {value};\n"
        code += f"\t\t\t{seen_flag(self.c_var)} = true;\n"
        code += "\t\t\targ_count += 2;\n"
        if self.options.bind_positionals:
            # the rest of the loop body binds positionals
            code += "\t\t\tcontinue;\n"
        code += "\t\t}\n"
        return code

    def post_loop_fragment(self) -> str:
        code = f"\tif (!{seen_flag(self.c_var)}) {{\n"
        if self.argument.is_required:
            # required wins over any default
            code += "\t\tusage(argv[0]);\n"
            code += "\t\texit(1);\n"
        elif self.argument.default is not None:
            literal = render_default(self.data_type, self.argument.default)
            code += f"\t\t*{self.c_var} = {literal};\n"
        code += "\t}\n"
        return code


class PositionalEmitter(ArgumentEmitter):
    """Fragments for an argument bound by position"""

    argument: PositionalArgument

    def __init__(
        self,
        argument: PositionalArgument,
        index: int,
        options: Optional[GenerationOptions] = None,
    ):
        super().__init__(argument, options)
        self.index = index

    def match_fragment(self) -> str:
        """
        Binding inside the token loop, reached only by tokens no flag consumed.

        i - arg_count - 1 counts the unconsumed tokens before argv[i], so
        flags and positionals may be interleaved.
        """
        if not self.options.bind_positionals:
            return ""
        value = convert_token(self.data_type, "argv[i]")
        return (
            f"\t\tif (i - arg_count - 1 == {self.index}) {{\n"
            f"\t\t\t*{self.c_var} = {value};\n"
            "\t\t}\n"
        )

    def post_loop_fragment(self) -> str:
        return ""
