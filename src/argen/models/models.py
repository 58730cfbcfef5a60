"""Pydantic models for argument specifications.

These models define the structure of the JSON/YAML documents describing a
command-line interface. Schema problems (missing keys, wrong value types) and
value rules (identifiers, type whitelist, flag names, defaults) are both
checked while the model is built, so every ``ArgumentSpecification`` in
existence is valid. Rule violations carry the ``spec_rule`` error type, which
lets ``load_spec`` tell an invalid document from a malformed one.
"""

import re
from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError

from argen.models.errors import MalformedSpecError, SpecValidationError

IDENTIFIER_PATTERN = re.compile(r"[_A-Za-z][_A-Za-z0-9]*")
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

RULE_ERROR = "spec_rule"


class CType(Enum):
    """C types an argument may be parsed into"""

    CHAR = "char"
    STRING = "char*"
    INT32 = "int32"

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]


def _rule_violation(message: str, value: Any) -> PydanticCustomError:
    return PydanticCustomError(RULE_ERROR, message + " {value}", {"value": repr(value)})


def _has_whitespace(text: str) -> bool:
    return any(ch.isspace() for ch in text)


def _check_flag_name(value: str) -> str:
    if _has_whitespace(value):
        raise _rule_violation("invalid argument name", value)
    return value


FlagName = Annotated[StrictStr, AfterValidator(_check_flag_name)]


class SpecModel(BaseModel):
    """Base model: immutable once built."""

    model_config = ConfigDict(frozen=True)


class ArgumentBase(SpecModel):
    """Fields shared by positional and named arguments."""

    c_var: StrictStr = Field(
        description="C variable receiving the value. Must be a valid C identifier."
    )
    c_type: CType = Field(description="C type of the variable: char, char* or int32.")
    help: Optional[StrictStr] = Field(
        default=None, description="Help text shown in the usage message."
    )

    @field_validator("c_var")
    @classmethod
    def check_identifier(cls, v: str) -> str:
        if not IDENTIFIER_PATTERN.fullmatch(v):
            raise _rule_violation("invalid C variable", v)
        return v

    @field_validator("c_type", mode="before")
    @classmethod
    def check_type_name(cls, v: Any) -> Any:
        """Names outside the whitelist are rule violations, other values schema errors."""
        if isinstance(v, str) and v not in CType.names():
            raise PydanticCustomError(
                RULE_ERROR,
                "invalid C type {value} (expected one of {expected})",
                {"value": repr(v), "expected": ", ".join(CType.names())},
            )
        return v


class PositionalArgument(ArgumentBase):
    """Argument bound by its position in the command line."""


class NamedArgument(ArgumentBase):
    """Argument bound by a ``--name`` flag followed by its value."""

    name: FlagName = Field(
        description="Long flag name, matched as --name. Must not contain whitespace."
    )
    short: Optional[StrictStr] = Field(
        default=None, description="Single-character short flag, shown as -x."
    )
    aliases: Optional[list[FlagName]] = Field(
        default=None, description="Alternative long flag names. Must not contain whitespace."
    )
    required: Optional[StrictBool] = Field(
        default=None,
        description="Exit with the usage message when missing. Takes precedence over default.",
    )
    default: Optional[StrictStr] = Field(
        default=None,
        description=(
            "Literal assigned when the flag is missing: a decimal int32 for int32, "
            "one ASCII character for char, any text for char*."
        ),
    )

    @field_validator("short")
    @classmethod
    def check_short(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) != 1:
            raise _rule_violation("invalid short name", v)
        return v

    @field_validator("default")
    @classmethod
    def check_default(cls, v: Optional[str], info: ValidationInfo) -> Optional[str]:
        # c_type is absent when it failed its own validation
        data_type = info.data.get("c_type")
        if v is None or data_type is None:
            return v

        if data_type is CType.INT32:
            if not INTEGER_PATTERN.fullmatch(v):
                raise _rule_violation("invalid int32 default", v)
            if not INT32_MIN <= int(v) <= INT32_MAX:
                raise _rule_violation("int32 default out of range", v)
        elif data_type is CType.CHAR:
            if len(v) != 1 or not v.isascii():
                raise _rule_violation("char default must be one ASCII character, got", v)
        return v

    @property
    def is_required(self) -> bool:
        return bool(self.required)

    @property
    def long_names(self) -> list[str]:
        return [self.name, *(self.aliases or [])]

    @property
    def flag_tokens(self) -> list[str]:
        """Every command-line token naming this argument, long name first."""
        tokens = [f"--{self.name}"]
        if self.short is not None:
            tokens.append(f"-{self.short}")
        tokens.extend(f"--{alias}" for alias in self.aliases or [])
        return tokens


class ArgumentSpecification(SpecModel):
    """Root model: the positional and named arguments of one program.

    Positional order defines binding order; named order only affects the
    order of match checks and usage lines.
    """

    positional: list[PositionalArgument] = Field(
        description="Arguments bound by position, in binding order."
    )
    non_positional: list[NamedArgument] = Field(
        description="Flag arguments, in usage and match order."
    )

    @property
    def argument_count(self) -> int:
        return len(self.positional) + len(self.non_positional)


def _location(loc: tuple) -> str:
    """('non_positional', 0, 'aliases', 1) -> non_positional[0].aliases[1]"""
    text = ""
    for part in loc:
        if isinstance(part, int):
            text += f"[{part}]"
        else:
            text += f".{part}" if text else str(part)
    return text or "<root>"


def _describe_schema_errors(details: list[dict]) -> str:
    lines = [f"  - {_location(detail['loc'])}: {detail['msg']}" for detail in details]
    return "Malformed argument specification:\n" + "\n".join(lines)


def load_spec(raw: Any) -> ArgumentSpecification:
    """
    Build a validated specification from a decoded document.

    Args:
        raw: Mapping with 'positional' and 'non_positional' lists

    Returns:
        Validated ArgumentSpecification

    Raises:
        MalformedSpecError: If the document does not match the schema
        SpecValidationError: If any argument breaks a value rule
    """
    if not isinstance(raw, dict):
        raise MalformedSpecError(
            f"Malformed argument specification: expected a mapping, got {type(raw).__name__}"
        )

    try:
        return ArgumentSpecification.model_validate(raw)
    except ValidationError as e:
        details = e.errors()
        schema_errors = [d for d in details if d["type"] != RULE_ERROR]
        if schema_errors:
            raise MalformedSpecError(_describe_schema_errors(schema_errors)) from e
        raise SpecValidationError(
            [f"{_location(d['loc'])}: {d['msg']}" for d in details]
        ) from e
