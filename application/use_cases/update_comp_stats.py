"""Use case: harvest matches and publish ranked composition stats."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Sequence

from application.services.aggregator import CompositionAggregator
from application.services.identity_resolver import IdentityResolver
from application.services.match_collector import MatchCollector
from application.services.publisher import Publisher
from application.services.seed import SeedDiscoveryService
from config.settings import Settings
from core.logging import context, get_logger, traceable
from domain.entities import DocumentMeta, MatchRecord, OutputDocument
from domain.enums import Tier
from infrastructure import (
    CatalogClient,
    LeagueRepository,
    MatchRepository,
    RiotAPIClient,
    SummonerRepository,
)
from infrastructure.api import PLACEHOLDER_VERSION

logger = get_logger(__name__, service="update-comps")

EXIT_OK = 0
EXIT_OUTAGE = 1
EXIT_CONFIG = 2


@dataclass
class RunResult:
    seeds: int = 0
    identities: int = 0
    matches_fetched: int = 0
    matches_kept: int = 0
    compositions: int = 0
    published: bool = False
    patch: str = PLACEHOLDER_VERSION

    @property
    def outage(self) -> bool:
        """Nothing usable came back from the ladder or match service at all."""
        return self.seeds == 0 or self.identities == 0 or self.matches_fetched == 0

    @property
    def exit_code(self) -> int:
        return EXIT_OUTAGE if self.outage else EXIT_OK


class UpdateCompStatsUseCase:
    """
    Runs the pipeline once:

        seeds → identities → match records → ranked compositions → publish

    Per-item failures are absorbed by each stage. The run is reported as an
    outage only when a networked stage produced nothing at all; a sample too
    small to rank anything is a normal, quiet outcome.
    """

    def __init__(
        self,
        *,
        seed_service: SeedDiscoveryService,
        resolver: IdentityResolver,
        collector: MatchCollector,
        aggregator: CompositionAggregator,
        publisher: Publisher,
        catalog: Optional[CatalogClient] = None,
        platform: str,
        region: str,
        queues: Sequence[int],
        seed_players: int = 30,
        count_per: int = 5,
        min_sample: int = 5,
        top_n: int = 30,
    ) -> None:
        self.seed_service = seed_service
        self.resolver = resolver
        self.collector = collector
        self.aggregator = aggregator
        self.publisher = publisher
        self.catalog = catalog
        self.platform = platform
        self.region = region
        self.queues = tuple(queues)
        self.seed_players = seed_players
        self.count_per = count_per
        self.min_sample = min_sample
        self.top_n = top_n

    @classmethod
    def from_settings(cls, settings: Settings, api_client: RiotAPIClient) -> "UpdateCompStatsUseCase":
        return cls(
            seed_service=SeedDiscoveryService(
                LeagueRepository(api_client),
                paged_tiers=[Tier.from_string(t) for t in settings.PAGED_TIERS],
                max_pages_per_division=settings.MAX_PAGES_PER_DIVISION,
            ),
            resolver=IdentityResolver(SummonerRepository(api_client)),
            collector=MatchCollector(
                MatchRepository(api_client),
                allowed_queues=settings.QUEUES,
                fetch_concurrency=settings.FETCH_CONCURRENCY,
            ),
            aggregator=CompositionAggregator(),
            publisher=Publisher(settings.OUTPUT_PATH),
            catalog=CatalogClient(settings.CATALOG_URL),
            platform=settings.platform.value,
            region=settings.region,
            queues=settings.QUEUES,
            seed_players=settings.SEED_PLAYERS,
            count_per=settings.COUNT_PER,
            min_sample=settings.MIN_SAMPLE,
            top_n=settings.TOP_N,
        )

    @traceable
    async def execute(self) -> RunResult:
        result = RunResult()

        with context(stage="seeds"):
            seeds = await self.seed_service.discover(self.seed_players)
        result.seeds = len(seeds)
        logger.info(f"seeds: {len(seeds)}/{self.seed_players}")
        if not seeds:
            logger.error("ladder returned no seeds, nothing to harvest")
            return result

        with context(stage="identities"):
            puuids = await self.resolver.resolve_all(seeds)
        result.identities = len(puuids)
        logger.info(f"identities: {len(puuids)}")
        if not puuids:
            logger.error("no seed could be resolved to an identity")
            return result

        with context(stage="matches"):
            records = await self.collector.collect(puuids, self.count_per)
        result.matches_fetched = self.collector.stats.fetched
        result.matches_kept = len(records)
        if result.matches_fetched == 0:
            logger.error("no match could be fetched")
            return result

        with context(stage="aggregate"):
            comps = self.aggregator.aggregate(records, self.min_sample, self.top_n)
        result.compositions = len(comps)

        result.patch = await self._patch_tag(records)
        document = OutputDocument(
            meta=DocumentMeta(
                platform=self.platform,
                region=self.region,
                queue_filter=self.queues,
                sample_match_count=len(records),
                patch=result.patch,
            ),
            comps=comps,
        )
        with context(stage="publish"):
            result.published = self.publisher.publish(document)
        return result

    async def _patch_tag(self, records: List[MatchRecord]) -> str:
        """Catalog version first, then the sample's dominant patch, then the placeholder."""
        if self.catalog is not None:
            tag = await self.catalog.patch_tag()
            if tag:
                return tag
        patches = Counter(r.patch_version for r in records if r.patch_version)
        if patches:
            return patches.most_common(1)[0][0]
        return PLACEHOLDER_VERSION
