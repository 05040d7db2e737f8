"""Domain contracts (protocols) used across layers."""

from rer_departures.domain.contracts.journey_normalizer import JourneyNormalizerProtocol

__all__ = ["JourneyNormalizerProtocol"]
