"""
Concurrent nearby-entity lookups with deduplication and categorization.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ...config.routing_config import RoutingConfig
from ...data.models import (
    EntityCategory,
    EntityCounts,
    NearbyEntity,
    PlaceRecord,
    SamplePoint
)
from ...providers.base import NearbyEntityDirectory
from ...providers.errors import DirectoryLookupFailed

logger = logging.getLogger(__name__)


def place_identity(record: PlaceRecord) -> str:
    """Stable identity of a place, synthesized from its location when it has no id."""
    if record.place_id:
        return record.place_id
    return f"{record.location.latitude}-{record.location.longitude}"


def categorize_place(record: PlaceRecord, store_types: Iterable[str]) -> EntityCategory:
    """
    Assign a category to a place. Checks run in priority order, first match wins.

    Args:
        record: Raw place from the directory
        store_types: Category tags that mark a place as a store

    Returns:
        POLICE, HOSPITAL, STORE, or BUILDING for anything else
    """
    tags = set(record.category_tags)

    if 'police' in tags:
        return EntityCategory.POLICE
    if 'hospital' in tags or 'doctor' in tags:
        return EntityCategory.HOSPITAL
    if tags.intersection(store_types) or 'store' in (record.name or '').lower():
        return EntityCategory.STORE
    return EntityCategory.BUILDING


class NearbyEntityAggregator:
    """
    Collects the distinct points of interest around a set of sample points.

    One directory lookup is issued per sample point, all of them concurrently.
    A lookup that fails or does not finish within the aggregation timeout
    contributes no results; it never fails the aggregation.
    """

    def __init__(self, directory: NearbyEntityDirectory, config: Optional[RoutingConfig] = None):
        """
        Initialize the aggregator.

        Args:
            directory: Nearby Entity Directory to query
            config: Routing configuration parameters
        """
        self.directory = directory
        self.config = config or RoutingConfig()
        self._store_types = frozenset(self.config.store_types)

    def aggregate(self, points: Sequence[SamplePoint],
                  radius_meters: Optional[float] = None) -> Tuple[List[NearbyEntity], EntityCounts]:
        """
        Look up, deduplicate and categorize entities near the sample points.

        Args:
            points: Sample points to search around
            radius_meters: Search radius, defaults to the configured radius

        Returns:
            (entities, counts) where entities are in discovery order and capped
            at `max_entities`, and counts cover every distinct entity found
        """
        if not points:
            return [], EntityCounts()

        radius = radius_meters if radius_meters is not None else self.config.search_radius_m
        responses = self._fetch_all(points, radius)

        unique = self._deduplicate(responses)
        counts = EntityCounts.from_entities(unique)
        entities = unique[:self.config.max_entities]

        logger.debug(f"Aggregated {len(unique)} distinct entities from {len(points)} sample points "
                     f"(police={counts.police}, hospital={counts.hospital}, "
                     f"store={counts.store}, building={counts.building})")
        return entities, counts

    def _fetch_all(self, points: Sequence[SamplePoint], radius: float) -> List[List[PlaceRecord]]:
        """Run every lookup concurrently and return responses in completion order."""
        responses: List[List[PlaceRecord]] = []
        executor = ThreadPoolExecutor(
            max_workers=min(self.config.max_lookup_workers, len(points)),
            thread_name_prefix="entity-lookup"
        )
        try:
            futures = [executor.submit(self._lookup, point, radius) for point in points]
            try:
                for future in as_completed(futures, timeout=self.config.aggregation_timeout_s):
                    responses.append(future.result())
            except FuturesTimeoutError:
                pending = sum(1 for future in futures if not future.done())
                logger.warning(f"{pending} nearby lookups did not finish within "
                               f"{self.config.aggregation_timeout_s}s, counting them as empty")
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        return responses

    def _lookup(self, point: SamplePoint, radius: float) -> List[PlaceRecord]:
        """Query the directory around one sample point. Failures yield no results."""
        try:
            return self.directory.search(point.coordinate, radius, self.config.search_keywords)
        except DirectoryLookupFailed as e:
            logger.warning(f"Nearby lookup failed, treating as empty: {e}")
            return []
        except Exception as e:
            logger.error(f"Unexpected error in nearby lookup at {point.coordinate.as_tuple()}: {e}")
            return []

    def _deduplicate(self, responses: Iterable[List[PlaceRecord]]) -> List[NearbyEntity]:
        """Collapse places by identity; the first one seen is kept."""
        by_identity: Dict[str, NearbyEntity] = {}

        for records in responses:
            for record in records:
                identity = place_identity(record)
                if identity in by_identity:
                    continue
                by_identity[identity] = NearbyEntity(
                    identity=identity,
                    display_name=record.name,
                    location=record.location,
                    category=categorize_place(record, self._store_types)
                )

        return list(by_identity.values())
