"""Desktop sync client compatibility policy."""

from __future__ import annotations

import logging
import re

from packaging.version import InvalidVersion, Version

from fastapi_federated_gate.component import ComponentCategory, GateComponent
from fastapi_federated_gate.context import GateContext
from fastapi_federated_gate.decisions import Decision
from fastapi_federated_gate.signals import strip_webroot

logger = logging.getLogger(__name__)

# Remote file access and OCS API endpoints used by sync clients
DATA_ACCESS_PREFIXES = ("/remote.php/", "/ocs/")

# Desktop clients identify themselves as mirall (or csyncoC for old builds).
# TODO: expose the client pattern and minimum version through GateSettings.
DESKTOP_CLIENT_PATTERN = re.compile(r"\b(?:mirall|csyncoC)/")
MIN_DESKTOP_CLIENT_VERSION = Version("2.5.0")

# Greedy prefix: the last "/x.y.z" token in the header wins.
_VERSION_PATTERN = re.compile(r"^.*/(\d+\.\d+\.\d+).*$")


def is_desktop_client(
    user_agent: str | None, pattern: re.Pattern[str] = DESKTOP_CLIENT_PATTERN
) -> bool:
    return bool(user_agent) and pattern.search(user_agent) is not None


def parse_client_version(user_agent: str | None) -> Version | None:
    """Extract the ``major.minor.patch`` version from a user agent, if any."""
    if not user_agent:
        return None
    match = _VERSION_PATTERN.match(user_agent)
    if match is None:
        return None
    try:
        return Version(match.group(1))
    except InvalidVersion:
        return None


class DesktopClientCompatibility(GateComponent):
    """Sends old desktop clients hitting data-access endpoints to federated login.

    Clients at or above ``min_version`` negotiate federated login on their own
    and are let through. Clients without a readable version are redirected.
    """

    category = ComponentCategory.DESKTOP_CLIENT

    def __init__(
        self,
        *,
        prefixes: tuple[str, ...] = DATA_ACCESS_PREFIXES,
        client_pattern: re.Pattern[str] = DESKTOP_CLIENT_PATTERN,
        min_version: Version = MIN_DESKTOP_CLIENT_VERSION,
    ) -> None:
        self._prefixes = prefixes
        self._client_pattern = client_pattern
        self._min_version = min_version

    def _is_data_access(self, ctx: GateContext) -> bool:
        path = strip_webroot(ctx.request.full_uri.split("?", 1)[0], ctx.config.webroot)
        return path.startswith(self._prefixes)

    def resolve(self, ctx: GateContext) -> Decision | None:
        if not ctx.config.auth.desktop_clients_allowed:
            return None
        if not self._is_data_access(ctx):
            return None
        if ctx.is_logged_in:
            return None
        user_agent = ctx.request.user_agent
        if not is_desktop_client(user_agent, self._client_pattern):
            return None

        ctx.redirect_situation = True

        version = parse_client_version(user_agent)
        if version is not None and version >= self._min_version:
            logger.info(
                "Desktop client %s supports federated login, not redirecting", version
            )
            ctx.redirect_situation = False

        return None
