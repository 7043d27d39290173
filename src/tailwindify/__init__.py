"""tailwindify: convert CSS rules into Tailwind CSS utility classes."""

__version__ = "0.1.0"

from tailwindify.config import ConverterConfig, load_config, resolve_config  # noqa: E402
from tailwindify.converter import (  # noqa: E402
    ConversionResult,
    ConvertedNode,
    TailwindConverter,
)
from tailwindify.errors import (  # noqa: E402
    ConfigError,
    CSSParseError,
    TailwindifyError,
)
from tailwindify.reduction import reduce_classes  # noqa: E402

__all__ = [
    "CSSParseError",
    "ConfigError",
    "ConversionResult",
    "ConvertedNode",
    "ConverterConfig",
    "TailwindConverter",
    "TailwindifyError",
    "load_config",
    "reduce_classes",
    "resolve_config",
]
