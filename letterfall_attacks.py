
"""Attack scheduling between peers"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from letterfall_scoring import attack_rows

logger = logging.getLogger(__name__)

ATTACK_DELAY_MS = 1000


@dataclass(frozen=True)
class Attack:
    timestamp: int      # ms, local clock; not applied before this
    rows: int
    applied: bool = False


def create_attack(word_length: int, now: int, delay: int = ATTACK_DELAY_MS) -> Attack:
    return Attack(timestamp=now + delay, rows=attack_rows(word_length))


def queue_attack(queue: Sequence[Attack], attack: Attack) -> Tuple[Attack, ...]:
    """Insert keeping timestamp order; equal timestamps keep arrival order."""
    items = list(queue)
    idx = len(items)
    while idx > 0 and items[idx - 1].timestamp > attack.timestamp:
        idx -= 1
    items.insert(idx, attack)
    return tuple(items)


def process_attacks(queue: Sequence[Attack], now: int,
                    apply: Callable[[int], None]) -> Tuple[Attack, ...]:
    """Call apply(rows) for every due attack in queue order; return those not yet due."""
    remaining: List[Attack] = []
    for attack in queue:
        if attack.applied:
            continue
        if attack.timestamp <= now:
            logger.debug("Applying attack of %d rows due at %d (now %d)", attack.rows, attack.timestamp, now)
            apply(attack.rows)
        else:
            remaining.append(attack)
    return tuple(remaining)


# -------------------------------------------------------------
# CLOCK OFFSET
# -------------------------------------------------------------

def estimate_clock_offset(remote_sender_time: int, local_now: int) -> int:
    """Local minus remote clock, measured once from the handshake."""
    return local_now - remote_sender_time


def schedule_remote_attack(at: int, rows: int, offset: int) -> Attack:
    """Attack announced by the peer with a due time on the peer's clock."""
    return Attack(timestamp=at + offset, rows=rows)
