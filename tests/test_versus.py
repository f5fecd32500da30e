from dataclasses import replace

import pytest
from pydantic import ValidationError

from letterfall_attacks import Attack
from letterfall_board import CellKind
from letterfall_engine import GameEngine
from letterfall_protocol import (PROTOCOL_VERSION, AttackMessage, Emote, GameOver, Hello,
                                 decode_message, encode_message)
from letterfall_versus import VersusController

from helpers import piece, staged


def test_host_and_guest_share_a_game():
    controller = VersusController(GameEngine())
    hosted, hello = controller.host(seed=99, now=10_000)
    assert hello.seed == 99 and hello.version == PROTOCOL_VERSION
    joined = controller.join(hello, now=4_000)
    assert joined.state == hosted.state
    assert joined.clock_offset == -6_000


def test_incoming_attack_waits_for_its_time():
    controller = VersusController(GameEngine())
    _, hello = controller.host(seed=5, now=10_000)
    match = controller.join(hello, now=4_000)
    match = controller.receive(match, AttackMessage(applied_at_time=11_000, rows=1), now=4_100)
    assert [a.timestamp for a in match.incoming] == [5_000]

    early, sent = controller.step(match, 16, now=4_999)
    assert sent == []
    assert len(early.incoming) == 1
    assert early.state.board == match.state.board

    hit, _ = controller.step(early, 16, now=5_000)
    assert hit.incoming == ()
    bottom = hit.state.board[-1]
    assert any(cell.kind is CellKind.JUNK for cell in bottom)


def test_cleared_words_become_outgoing_attacks():
    engine = GameEngine()
    controller = VersusController(engine)
    match, _ = controller.host(seed=1, now=0)
    match = replace(match, state=staged(engine, ["CA"], piece(0, "QQQT", row=0, col=2)))
    after, sent = controller.act(match, engine.hard_drop, now=2_500)
    assert after.state.words_found == ("CAT",)
    assert sent == [AttackMessage(applied_at_time=3_500, rows=1)]


def test_topping_out_announces_game_over():
    engine = GameEngine()
    controller = VersusController(engine)
    match, _ = controller.host(seed=1, now=0)
    rows = [".qqqqqqqqq"] * 4 + ["qqqqqqqqqq"] * 16
    match = replace(match, state=staged(engine, rows, piece(0, "QQQQ", row=0, col=0)))
    after, sent = controller.act(match, engine.hard_drop, now=0)
    assert after.state.over
    assert sent == [GameOver(winner="you")]


def test_junk_top_out_announces_game_over():
    engine = GameEngine()
    controller = VersusController(engine)
    match, _ = controller.host(seed=1, now=0)
    state = staged(engine, ["qqqqqqqqqq"] * 16, piece(0, "QQQQ", row=0, col=0))
    match = replace(match, state=state, incoming=(Attack(0, 5),))
    after, sent = controller.step(match, 16, now=10)
    assert after.state.over
    assert after.incoming == ()
    assert sent == [GameOver(winner="you")]
    _, again = controller.step(after, 16, now=20)
    assert again == []


def test_peer_messages_update_match():
    controller = VersusController(GameEngine())
    match, _ = controller.host(seed=3, now=0)
    assert controller.receive(match, Emote(id=2), now=0) is match
    assert controller.receive(match, GameOver(winner="me"), now=0).opponent_over
    rejoined = controller.receive(match, Hello(seed=8, sender_time=50), now=100)
    assert rejoined.seed == 8 and rejoined.clock_offset == 50


def test_wire_format():
    raw = encode_message(Hello(seed=42, sender_time=1_700))
    assert '"t":"hello"' in raw and '"now":1700' in raw
    assert decode_message(raw) == Hello(seed=42, sender_time=1_700)
    assert decode_message('{"t":"attack","at":5,"rows":2}') == AttackMessage(applied_at_time=5, rows=2)
    assert decode_message('{"t":"gameover","winner":"me"}').winner == "me"
    with pytest.raises(ValidationError):
        decode_message('{"t":"attack","rows":2}')
    with pytest.raises(ValidationError):
        decode_message('{"t":"teleport"}')
