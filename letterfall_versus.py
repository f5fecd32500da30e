
"""
Versus match glue.

Both peers simulate their own board from the same seed. The only things that
cross the wire are the handshake and attack notices; everything else stays
local. Incoming attacks are queued on arrival and drained into the board at
the start of the next step, never in the middle of one.
"""
import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Tuple

from letterfall_attacks import (Attack, create_attack, estimate_clock_offset, process_attacks,
                                queue_attack, schedule_remote_attack)
from letterfall_engine import GameEngine, GameState
from letterfall_protocol import PROTOCOL_VERSION, AttackMessage, Emote, GameOver, Hello

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VersusMatch:
    state: GameState
    seed: int
    clock_offset: int = 0                 # local clock minus peer clock
    incoming: Tuple[Attack, ...] = ()
    opponent_over: bool = False


class VersusController:
    def __init__(self, engine: GameEngine):
        self.engine = engine

    def host(self, seed: int, now: int) -> Tuple[VersusMatch, Hello]:
        """Start a match locally and build the hello to send to the peer."""
        match = VersusMatch(state=self.engine.new_game(seed), seed=seed)
        logger.info("Hosting versus match, seed %d", seed)
        return match, Hello(seed=seed, version=PROTOCOL_VERSION, sender_time=now)

    def join(self, hello: Hello, now: int) -> VersusMatch:
        if hello.version != PROTOCOL_VERSION:
            logger.warning("Peer protocol %s differs from ours (%s)", hello.version, PROTOCOL_VERSION)
        offset = estimate_clock_offset(hello.sender_time, now)
        logger.info("Joined versus match, seed %d, clock offset %d ms", hello.seed, offset)
        return VersusMatch(state=self.engine.new_game(hello.seed), seed=hello.seed, clock_offset=offset)

    def receive(self, match: VersusMatch, message, now: int) -> VersusMatch:
        """Fold one inbound message into the match without touching the board."""
        if isinstance(message, Hello):
            return self.join(message, now)
        if isinstance(message, AttackMessage):
            attack = schedule_remote_attack(message.applied_at_time, message.rows, match.clock_offset)
            logger.debug("Queued attack of %d rows for %d", attack.rows, attack.timestamp)
            return replace(match, incoming=queue_attack(match.incoming, attack))
        if isinstance(message, GameOver):
            return replace(match, opponent_over=True)
        if isinstance(message, Emote):
            return match
        raise TypeError(f"unknown message {message!r}")

    def step(self, match: VersusMatch, delta_ms: int, now: int) -> Tuple[VersusMatch, List]:
        """Apply attacks due by now, then advance the clock."""
        due: List[int] = []
        remaining = process_attacks(match.incoming, now, due.append)

        def advance(state: GameState) -> GameState:
            for rows in due:
                state = self.engine.add_junk_rows(state, rows)
            return self.engine.tick(state, delta_ms)

        return self.act(replace(match, incoming=remaining), advance, now)

    def act(self, match: VersusMatch, op: Callable[[GameState], GameState],
            now: int) -> Tuple[VersusMatch, List]:
        """Run one engine operation and collect the messages it produces."""
        before = match.state
        after = op(before)
        outgoing: List = []
        for word in after.words_found[len(before.words_found):]:
            attack = create_attack(len(word), now)
            if attack.rows > 0:
                outgoing.append(AttackMessage(applied_at_time=attack.timestamp, rows=attack.rows))
        if after.over and not before.over:
            outgoing.append(GameOver(winner="you"))
        return replace(match, state=after), outgoing
