"""Calendar provider encoders."""

from calinvite.providers.base import BaseProvider, UrlProvider
from calinvite.providers.google import GoogleProvider
from calinvite.providers.ics import IcsProvider, download_headers, sanitize_filename, wrap_for_download
from calinvite.providers.outlook import Office365Provider, OutlookProvider
from calinvite.providers.registry import (
    ENCODERS,
    SUPPORTED_PROVIDERS,
    ProviderKind,
    generate,
    get_encoder,
    parse_provider,
)
from calinvite.providers.yahoo import YahooProvider

__all__ = [
    "BaseProvider",
    "UrlProvider",
    "GoogleProvider",
    "OutlookProvider",
    "Office365Provider",
    "YahooProvider",
    "IcsProvider",
    "ENCODERS",
    "SUPPORTED_PROVIDERS",
    "ProviderKind",
    "generate",
    "get_encoder",
    "parse_provider",
    "download_headers",
    "sanitize_filename",
    "wrap_for_download",
]
