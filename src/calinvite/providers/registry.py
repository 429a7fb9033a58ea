"""Provider identifiers and encoder dispatch."""

import logging
from enum import Enum
from typing import Dict, Optional, Tuple, Type, Union

from calinvite.core.event_model import Event
from calinvite.exceptions.errors import CalInviteError, EncodingError, UnknownProviderError
from calinvite.providers.base import BaseProvider, Clock, HexSource
from calinvite.providers.google import GoogleProvider
from calinvite.providers.ics import IcsProvider
from calinvite.providers.outlook import Office365Provider, OutlookProvider
from calinvite.providers.yahoo import YahooProvider

logger = logging.getLogger(__name__)


class ProviderKind(str, Enum):
    GOOGLE = "google"
    OUTLOOK = "outlook"
    OFFICE365 = "office365"
    YAHOO = "yahoo"
    ICAL = "ical"
    ICS = "ics"


ENCODERS: Dict[ProviderKind, Type[BaseProvider]] = {
    ProviderKind.GOOGLE: GoogleProvider,
    ProviderKind.OUTLOOK: OutlookProvider,
    ProviderKind.OFFICE365: Office365Provider,
    ProviderKind.YAHOO: YahooProvider,
    ProviderKind.ICAL: IcsProvider,
    ProviderKind.ICS: IcsProvider,
}

SUPPORTED_PROVIDERS: Tuple[str, ...] = tuple(kind.value for kind in ProviderKind)


def parse_provider(provider: Union[ProviderKind, str]) -> ProviderKind:
    """Resolve a case-insensitive provider token.

    Raises:
        UnknownProviderError: If the token names no provider.
    """
    if isinstance(provider, ProviderKind):
        return provider
    if isinstance(provider, str):
        try:
            return ProviderKind(provider.strip().lower())
        except ValueError:
            pass
    logger.warning("Unknown calendar provider requested: %r", provider)
    raise UnknownProviderError(provider, SUPPORTED_PROVIDERS)


def get_encoder(provider: Union[ProviderKind, str]) -> Type[BaseProvider]:
    return ENCODERS[parse_provider(provider)]


def generate(
    event: Event,
    provider: Union[ProviderKind, str],
    clock: Optional[Clock] = None,
    token_hex: Optional[HexSource] = None,
) -> str:
    """Render ``event`` for ``provider``.

    Args:
        event: The event to render.
        provider: Provider identifier (google, outlook, office365, yahoo, ical, ics).
        clock: Optional source of the current instant.
        token_hex: Optional source of random hex for UIDs.

    Returns:
        A URL, newline-separated URLs, or ICS text.

    Raises:
        UnknownProviderError: For an unknown provider.
        MissingRequiredFieldError: If a timed event lacks start or end.
        EncodingError: For any other formatting failure.
    """
    encoder_cls = get_encoder(provider)
    encoder = encoder_cls(event, clock=clock, token_hex=token_hex)
    try:
        return encoder.generate()
    except CalInviteError:
        raise
    except Exception as exc:
        logger.error("Failed to encode %r for %s: %s", event.title, encoder.name, exc)
        raise EncodingError(
            f"Failed to encode event for {encoder.name}: {exc}", provider=encoder.name
        ) from exc
