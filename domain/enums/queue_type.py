"""Queue type enumeration for TFT matches."""
from enum import Enum


class QueueType(Enum):
    """TFT queues as reported by ``info.queue_id`` in match payloads.

    Provides:
    - queue_id: numeric queue id used for post-fetch filtering
    - queue_name: human-readable name
    - api_queue_name: string used by league endpoints (ranked queues only)
    """

    NORMAL = 1090
    RANKED = 1100
    HYPER_ROLL = 1130
    DOUBLE_UP = 1160

    @property
    def queue_id(self) -> int:
        return self.value

    @property
    def queue_name(self) -> str:
        names = {
            1090: "Normal",
            1100: "Ranked",
            1130: "Hyper Roll",
            1160: "Double Up",
        }
        return names[self.value]

    @property
    def api_queue_name(self) -> str:
        names = {
            1100: "RANKED_TFT",
            1130: "RANKED_TFT_TURBO",
            1160: "RANKED_TFT_DOUBLE_UP",
        }
        return names.get(self.value, "")

    @classmethod
    def describe(cls, queue_ids) -> str:
        """Human-readable label for a set of queue ids, unknown ids kept numeric."""
        known = {q.value: q.queue_name for q in cls}
        return ", ".join(known.get(q, str(q)) for q in queue_ids)
