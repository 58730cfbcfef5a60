"""Core functionality: code generation and its input/output"""

from argen.core.assembler import ModuleAssembler, generate
from argen.core.emitter import NamedEmitter, PositionalEmitter
from argen.core.spec_reader import read_spec_document, load_spec_file
from argen.core.output_writer import write_generated_source

__all__ = [
    'ModuleAssembler',
    'generate',
    'NamedEmitter',
    'PositionalEmitter',
    'read_spec_document',
    'load_spec_file',
    'write_generated_source'
]
