from .decoder import DecodeResult
from .encoding import spec_to_options
from .handler import (
    SpecHandler,
    decode_from_string,
    default_spec,
    new_spec_handler,
    normalize_from_options,
    normalize_with_report,
)
from .lookups import cos_level, cos_type_simple_value_of, fs_type_simple_value_of
from .models import AUTO_AGGREGATION, CosType, FSType, Source, VolumeSpec
from .outcomes import NormalizeReport, OptionOutcome, OutcomeKind

__all__ = [
    "AUTO_AGGREGATION",
    "CosType",
    "DecodeResult",
    "FSType",
    "NormalizeReport",
    "OptionOutcome",
    "OutcomeKind",
    "Source",
    "SpecHandler",
    "VolumeSpec",
    "cos_level",
    "cos_type_simple_value_of",
    "decode_from_string",
    "default_spec",
    "fs_type_simple_value_of",
    "new_spec_handler",
    "normalize_from_options",
    "normalize_with_report",
    "spec_to_options",
]
