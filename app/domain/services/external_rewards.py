from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from app.domain.entities.scenario import (
    ExternalRewardProjection,
    RewardDescriptor,
    TokenIdentity,
    TokenInfo,
    TokenPath,
)
from app.domain.services.numeric import ZERO, is_positive, period_value_from_apr


UNKNOWN_TOKEN = "Unknown"
PATH_SEPARATOR = "::"


@dataclass(frozen=True)
class ExternalRewardsSummary:
    rewards: tuple[ExternalRewardProjection, ...]
    total_value_usd: Decimal
    total_apr: Decimal


def resolve_token_label(token: TokenIdentity | None) -> str | None:
    """Display label for a reward token, or None when there is no identity.

    Order: last segment of a raw path, then symbol, then name, then "Unknown".
    """
    if token is None:
        return None
    if isinstance(token, TokenPath):
        segment = token.path.strip().split(PATH_SEPARATOR)[-1].strip()
        return segment or None
    if isinstance(token, TokenInfo):
        if token.symbol:
            return token.symbol
        if token.name:
            return token.name
        return UNKNOWN_TOKEN
    return None


def project_external_rewards(
    rewards: Iterable[RewardDescriptor] | None,
    *,
    deposit_usd: Decimal,
    timeline_days: Decimal,
) -> ExternalRewardsSummary:
    # Flat APR over the whole timeline: no leverage, no time-in-range.
    projections: list[ExternalRewardProjection] = []
    for descriptor in rewards or ():
        if not is_positive(descriptor.apr_percent):
            continue
        label = resolve_token_label(descriptor.token)
        if label is None:
            continue
        projections.append(
            ExternalRewardProjection(
                token=label,
                apr_percent=descriptor.apr_percent,
                projected_value_usd=period_value_from_apr(
                    deposit_usd=deposit_usd,
                    apr_percent=descriptor.apr_percent,
                    timeline_days=timeline_days,
                ),
            )
        )

    return ExternalRewardsSummary(
        rewards=tuple(projections),
        total_value_usd=sum((row.projected_value_usd for row in projections), ZERO),
        total_apr=sum((row.apr_percent for row in projections), ZERO),
    )
