"""Assembly of the generated C argument-parsing module"""

from dataclasses import replace
from typing import Optional

from argen.config.options import GenerationOptions
from argen.core.emitter import NamedEmitter, PositionalEmitter, c_string_literal
from argen.models.models import ArgumentSpecification
from argen.utils.logging_manager import get_logger

logger = get_logger(__name__)

HEADERS = ("stdbool.h", "stdint.h", "stdio.h", "stdlib.h", "string.h")

POSITIONAL_PLACEHOLDER = "[ARGS ...]"
HELP_INDENT = " " * 8


class ModuleAssembler:
    """
    Builds the C module for one specification.

    Sections are emitted in a fixed order (headers, usage, parse_args, main)
    and list arguments in specification order.
    """

    def __init__(self, spec: ArgumentSpecification, options: Optional[GenerationOptions] = None):
        self.spec = spec
        self.options = options or GenerationOptions()
        if not spec.positional:
            # nothing to bind, keep the plain layout
            self.options = replace(self.options, bind_positionals=False)
        self.positional = [
            PositionalEmitter(argument, index, self.options)
            for index, argument in enumerate(spec.positional)
        ]
        self.named = [NamedEmitter(argument, self.options) for argument in spec.non_positional]

    @property
    def emitters(self) -> list:
        return [*self.positional, *self.named]

    def headers(self) -> str:
        return "".join(f"#include <{header}>\n" for header in HEADERS)

    def _usage_banner(self) -> str:
        if self.options.bind_positionals and self.spec.positional:
            return " ".join(argument.c_var for argument in self.spec.positional)
        return POSITIONAL_PLACEHOLDER

    def _help_lines(self) -> list[str]:
        lines = ["  -h  --help", f"{HELP_INDENT}print this usage and exit"]

        for argument in self.spec.non_positional:
            prefix = f"  -{argument.short}" if argument.short is not None else "    "
            lines.append(prefix + "".join(f"  --{name}" for name in argument.long_names))
            if argument.help is not None:
                lines.append(f"{HELP_INDENT}{argument.help}")

        if self.options.bind_positionals:
            for argument in self.spec.positional:
                lines.append(f"  {argument.c_var}")
                if argument.help is not None:
                    lines.append(f"{HELP_INDENT}{argument.help}")

        return lines

    def usage_function(self) -> str:
        banner = c_string_literal(f"usage: %s [options] {self._usage_banner()}\n")
        code = "void usage(const char *progname) {\n"
        code += f"\tprintf({banner}, progname);\n"
        code += '\tprintf("%s",\n'
        for line in self._help_lines():
            code += "\t\t" + c_string_literal(line + "\n") + "\n"
        code += "\t);\n"
        code += "}\n"
        return code

    def parse_args_function(self) -> str:
        parameters = ["int argc", "char **argv"]
        parameters.extend(emitter.pointer_parameter() for emitter in self.emitters)

        body = f"void parse_args({', '.join(parameters)}) {{\n"

        for emitter in self.named:
            body += emitter.declare_seen_flag()
        body += "\tint arg_count = 0;\n"

        # flags, each consuming its value token
        body += "\tfor (int i = 1; i < argc; i++) {\n"
        for emitter in self.named:
            body += emitter.match_fragment()
        if self.options.bind_positionals:
            for emitter in self.positional:
                body += emitter.match_fragment()
        body += "\t}\n"

        if not self.options.bind_positionals:
            # whatever follows the consumed flag tokens
            body += "\tfor (int i = arg_count + 1; i < argc; i++) {\n"
            body += "\t}\n"
        else:
            body += f"\tif (argc - arg_count - 1 != {len(self.positional)}) {{\n"
            body += "\t\tusage(argv[0]);\n"
            body += "\t\texit(1);\n"
            body += "\t}\n"

        for emitter in self.emitters:
            body += emitter.post_loop_fragment()

        body += "}\n"
        return body

    def main_function(self) -> str:
        code = "int main(int argc, char **argv) {\n"
        for emitter in self.emitters:
            code += emitter.declare_variable()

        call_arguments = ["argc", "argv"]
        call_arguments.extend(emitter.address_argument() for emitter in self.emitters)
        code += f"\n\tparse_args({', '.join(call_arguments)});\n\n"

        code += "\t/* insert program logic here */\n"
        code += "\treturn 0;\n"
        code += "}\n"
        return code

    def generate(self) -> str:
        """Emit the whole module"""
        logger.debug(
            f"Generating module: {len(self.spec.positional)} positional, "
            f"{len(self.spec.non_positional)} named argument(s), options={self.options}"
        )
        sections = [
            self.headers(),
            self.usage_function(),
            self.parse_args_function(),
            self.main_function(),
        ]
        return "\n".join(sections)


def generate(spec: ArgumentSpecification, options: Optional[GenerationOptions] = None) -> str:
    """Generate the C argument-parsing module for a validated specification"""
    return ModuleAssembler(spec, options).generate()
