from __future__ import annotations

from config.settings import Settings
from application.use_cases import RunResult, UpdateCompStatsUseCase
from core.logging import bind, get_logger
from domain.enums import QueueType
from infrastructure import HostRateGates, RiotAPIClient


class UpdateCommand:
    """One harvest run with a short console summary."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._log = get_logger(__name__, service="update-cli")

    def _print_summary_header(self) -> None:
        s = self.settings
        print("\n" + "=" * 57)
        print("TFT COMPOSITION STATS")
        print("=" * 57)
        print(f"Server: {s.platform.friendly} ({s.platform.value} → {s.region})")
        print(f"Queues: {QueueType.describe(s.QUEUES)}")
        print(f"Seeds: {s.SEED_PLAYERS}  Matches per player: {s.COUNT_PER}")
        print(f"Min sample: {s.MIN_SAMPLE}  Top: {s.TOP_N}")
        print(f"Output: {s.OUTPUT_PATH}")
        print("=" * 57 + "\n")

    @staticmethod
    def _print_result(result: RunResult) -> None:
        print("")
        print(f"Seeds: {result.seeds}  Identities: {result.identities}")
        print(f"Matches fetched: {result.matches_fetched}  kept: {result.matches_kept}")
        print(f"Compositions ranked: {result.compositions}  Patch: {result.patch}")
        if result.outage:
            print("Run failed: an upstream stage returned nothing. Existing output was left untouched.")
        elif result.published:
            print("Published.")
        else:
            print("Not enough games for any composition. Existing output was left untouched.")

    def _make_client(self) -> RiotAPIClient:
        s = self.settings
        gates = HostRateGates(
            s.RATE_LIMIT_PER_1_SEC,
            s.RATE_LIMIT_PER_2_MIN,
            jitter=s.RATE_JITTER_SEC,
        )
        return RiotAPIClient(
            s.RIOT_API_KEY,
            s.platform,
            s.region,
            gates=gates,
            max_attempts=s.MAX_RETRIES,
            retry_backoff=s.RETRY_BACKOFF,
            default_retry_after=s.DEFAULT_RETRY_AFTER,
            timeout=s.REQUEST_TIMEOUT,
        )

    async def run(self) -> RunResult:
        self._print_summary_header()
        bind(platform=self.settings.platform.value, region=self.settings.region)
        self._log.info("start")
        async with self._make_client() as api:
            use_case = UpdateCompStatsUseCase.from_settings(self.settings, api)
            result = await use_case.execute()
            self._log.info(f"requests={api.request_count}")
        self._print_result(result)
        if result.outage:
            self._log.error(f"done exit={result.exit_code}")
        else:
            self._log.success(f"done comps={result.compositions} published={result.published}")
        return result
