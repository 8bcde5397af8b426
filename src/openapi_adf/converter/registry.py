"""Output format selection."""

from openapi_adf.converter.adf import ADF_FORMAT, ADFConverter
from openapi_adf.converter.base import Converter

CONVERTERS: dict[str, type[Converter]] = {
    ADF_FORMAT: ADFConverter,
}


def available_formats() -> list[str]:
    return sorted(CONVERTERS)


def get_converter(fmt: str) -> Converter:
    """Return a fresh converter for the given format token."""
    try:
        return CONVERTERS[fmt.lower()]()
    except KeyError:
        raise ValueError(
            f"unknown output format {fmt!r}; choose from: {', '.join(available_formats())}"
        ) from None
