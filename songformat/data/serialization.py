"""
Song Document Codec

Encodes song models (see `songformat.data.schema`) to JSON documents and
decodes them back. Two profiles are provided:

    - INDENTED:  pretty-printed, for hand editing
    - CONDENSED: no extra whitespace, for distribution

Both profiles apply the same content rules:

    1. Enumerations are written by symbol ("LeadGuitar"), never by number.
       Technique flags are written as "HammerOn, Slide".
    2. Floats keep at most 3 fractional digits, trailing zeros trimmed,
       always with "." as the decimal point.
    3. Fields with EmitPolicy.OMIT_IF_SENTINEL are skipped when -1 and
       read back as -1 when missing.
    4. Fields with EmitPolicy.ALWAYS_EMIT (time offsets) are always written.
    5. Everything else is skipped when it equals its default.
    6. Only model fields are written; properties such as display names never are.

On decode, unknown fields are ignored and unknown enum symbols are an
error. A document that fails to decode raises DocumentError; nothing is
partially returned.

Usage:
    from songformat.data.serialization import CONDENSED, decode, encode

    text = encode(song, CONDENSED)
    song = decode(text, SongData)
"""

import json
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type, TypeVar, Union, get_args

from pydantic import BaseModel, ValidationError
from pydantic.fields import FieldInfo

from songformat.data.schema import (
    UNSET,
    EmitPolicy,
    SongNoteTechnique,
    get_emit_policy,
    technique_to_symbols,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

FLOAT_DIGITS = 3


class DocumentError(ValueError):
    """A song document could not be decoded."""


# =============================================================================
# PROFILES
# =============================================================================

@dataclass(frozen=True)
class CodecProfile:
    """Output formatting for song documents. Affects whitespace only."""
    name: str
    indent: Optional[int] = None
    separators: Tuple[str, str] = (",", ":")


INDENTED = CodecProfile(name="indented", indent=2, separators=(",", ": "))
CONDENSED = CodecProfile(name="condensed")

PROFILES: Dict[str, CodecProfile] = {
    INDENTED.name: INDENTED,
    CONDENSED.name: CONDENSED,
}


def get_profile(name: str) -> CodecProfile:
    """Look up a profile by name ("indented" or "condensed")."""
    try:
        return PROFILES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown codec profile: '{name}'. Valid profiles are: {list(PROFILES)}"
        ) from None


# =============================================================================
# ENCODING
# =============================================================================

def format_float(value: float) -> Union[int, float]:
    """
    Round a float for writing.

    Integral results come back as int so they are written without a
    trailing ".0" (1.0 → 1, -0.0 → 0).

    Raises:
        ValueError: If the value is NaN or infinite
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot encode non-finite float: {value}")
    rounded = round(value, FLOAT_DIGITS)
    if rounded.is_integer():
        return int(rounded)
    return rounded


def _is_default(value: Any, field: FieldInfo) -> bool:
    if value is None:
        return True
    if isinstance(value, Enum):
        return value == field.default
    # Containers and strings only count as default when missing entirely
    if isinstance(value, (BaseModel, list, tuple, str)):
        return False
    return value == field.default


def _should_write(value: Any, field: FieldInfo) -> bool:
    policy = get_emit_policy(field)
    if policy == EmitPolicy.ALWAYS_EMIT:
        return True
    if policy == EmitPolicy.OMIT_IF_SENTINEL:
        return value != UNSET
    return not _is_default(value, field)


def _encode_value(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return to_document(value)
    if isinstance(value, (list, tuple)):
        return [_encode_value(item) for item in value]
    # Flags first: IntFlag is also an int
    if isinstance(value, SongNoteTechnique):
        return technique_to_symbols(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return format_float(value)
    if value is None or isinstance(value, (int, str)):
        return value
    raise TypeError(f"Cannot encode value of type {type(value).__name__}: {value!r}")


def to_document(model: BaseModel) -> Dict[str, Any]:
    """Convert a model into a JSON-ready dict using the document rules."""
    document: Dict[str, Any] = {}
    for name, field in type(model).model_fields.items():
        value = getattr(model, name)
        if not _should_write(value, field):
            continue
        document[field.alias or name] = _encode_value(value)
    return document


def encode(
    model: Union[BaseModel, Sequence[BaseModel]],
    profile: CodecProfile = INDENTED,
) -> str:
    """
    Encode a model (or a list of models) as a song document.

    Args:
        model: The model to encode; a list encodes as a JSON array
        profile: INDENTED or CONDENSED

    Returns:
        The document text
    """
    if isinstance(model, BaseModel):
        document: Any = to_document(model)
        kind = type(model).__name__
    else:
        document = [to_document(item) for item in model]
        kind = f"list[{len(document)}]"

    text = json.dumps(document, indent=profile.indent, separators=profile.separators)
    logger.debug("Encoded %s with %s profile (%d chars)", kind, profile.name, len(text))
    return text


# =============================================================================
# DECODING
# =============================================================================

def _model_in(annotation: Any) -> Optional[Type[BaseModel]]:
    """Find the model class inside an annotation like Optional[List[SongNote]]."""
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    for arg in get_args(annotation):
        found = _model_in(arg)
        if found is not None:
            return found
    return None


def _fill_sentinels(data: Any, model_type: Type[BaseModel]) -> Any:
    """Copy of `data` with every missing sentinel field set to -1."""
    if not isinstance(data, dict):
        return data

    filled = dict(data)
    for name, field in model_type.model_fields.items():
        alias = field.alias or name
        if get_emit_policy(field) == EmitPolicy.OMIT_IF_SENTINEL:
            if alias not in filled and name not in filled:
                filled[alias] = UNSET
            continue

        nested_type = _model_in(field.annotation)
        if nested_type is None or alias not in filled:
            continue
        value = filled[alias]
        if isinstance(value, list):
            filled[alias] = [_fill_sentinels(item, nested_type) for item in value]
        else:
            filled[alias] = _fill_sentinels(value, nested_type)
    return filled


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-finite number {name} is not allowed")


def _parse(document: Union[str, bytes]) -> Any:
    # Covers JSONDecodeError, UnicodeDecodeError and NaN/Infinity literals
    try:
        return json.loads(document, parse_constant=_reject_constant)
    except ValueError as exc:
        raise DocumentError(f"Malformed song document: {exc}") from exc


def from_document(data: Any, model_type: Type[ModelT]) -> ModelT:
    """Build a model from an already-parsed document."""
    if not isinstance(data, dict):
        raise DocumentError(
            f"Expected a JSON object for {model_type.__name__}. Got: {type(data).__name__}"
        )
    try:
        return model_type.model_validate(_fill_sentinels(data, model_type))
    except ValidationError as exc:
        raise DocumentError(f"Invalid {model_type.__name__} document: {exc}") from exc


def decode(document: Union[str, bytes], model_type: Type[ModelT]) -> ModelT:
    """
    Decode a song document into a model.

    Args:
        document: Document text (or UTF-8 bytes)
        model_type: The model class the document holds, e.g. SongData

    Raises:
        DocumentError: On syntax errors, type mismatches or unknown enum symbols
    """
    model = from_document(_parse(document), model_type)
    logger.debug("Decoded %s", model_type.__name__)
    return model


def decode_list(document: Union[str, bytes], model_type: Type[ModelT]) -> List[ModelT]:
    """Decode a document holding a JSON array of models (e.g. vocals)."""
    data = _parse(document)
    if not isinstance(data, list):
        raise DocumentError(
            f"Expected a JSON array of {model_type.__name__}. Got: {type(data).__name__}"
        )
    models = [from_document(item, model_type) for item in data]
    logger.debug("Decoded %d %s entries", len(models), model_type.__name__)
    return models
