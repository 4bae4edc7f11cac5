"""
Song document storage.

Thin file adapter around the codec: `load`/`save` move raw document bytes,
`load_model`/`save_model` add encoding on top. Errors from the file system
and from decoding are raised to the caller unchanged.
"""

import logging
from pathlib import Path
from typing import List, Sequence, Type, Union

from pydantic import BaseModel

from songformat.data.serialization import (
    INDENTED,
    CodecProfile,
    ModelT,
    decode,
    decode_list,
    encode,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load(path: PathLike) -> bytes:
    """
    Read a document's bytes.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Song document not found: {path}")
    data = path.read_bytes()
    logger.debug("Loaded %s (%d bytes)", path, len(data))
    return data


def save(path: PathLike, data: bytes) -> bool:
    """Write a document's bytes, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    logger.debug("Saved %s (%d bytes)", path, len(data))
    return True


def load_model(path: PathLike, model_type: Type[ModelT]) -> ModelT:
    """Load and decode a document, e.g. `load_model("song.json", SongData)`."""
    return decode(load(path), model_type)


def load_models(path: PathLike, model_type: Type[ModelT]) -> List[ModelT]:
    """Load and decode a document holding a list of models."""
    return decode_list(load(path), model_type)


def save_model(
    path: PathLike,
    model: Union[BaseModel, Sequence[BaseModel]],
    profile: CodecProfile = INDENTED,
) -> bool:
    """Encode a model (or list of models) and write it."""
    return save(path, encode(model, profile).encode("utf-8"))
