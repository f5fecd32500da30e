import argparse
import logging
import sys
import time

import pygame

from letterfall_config import CONFIG, GameConfig
from letterfall_daily import daily_bonus, daily_seed, daily_word
from letterfall_engine import GameEngine
from letterfall_input import ShiftRepeat, action_for_key
from letterfall_layout import compute_dims
from letterfall_render import RenderAssets
from letterfall_words import load_dictionary

logger = logging.getLogger("letterfall")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Letterfall: falling letters, clear words.")
    p.add_argument("--seed", type=int, default=CONFIG["SEED"])
    p.add_argument("--daily", action="store_true", help="play today's fixed puzzle")
    p.add_argument("--dictionary", default=CONFIG["DICTIONARY_PATH"], help="word list, one per line")
    p.add_argument("--log-level", default=CONFIG["LOG_LEVEL"])
    return p.parse_args(argv)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    config = GameConfig.from_mapping(CONFIG)
    engine = GameEngine(config, load_dictionary(args.dictionary))

    bonus_word = None
    seed = args.seed
    if args.daily:
        seed = daily_seed()
        bonus_word = daily_word(seed)
        logger.info("Daily puzzle, bonus word %s", bonus_word)
    if seed is None:
        seed = time.time_ns() & 0xFFFFFFFFFFFFFFFF

    dims = compute_dims(config.board_width, config.board_height)
    screen = recreate_window(dims)
    pygame.display.set_caption("Letterfall")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(dims, font, config.board_height, config.board_width)
    clock = pygame.time.Clock()

    state = engine.new_game(seed)
    shift = ShiftRepeat()
    bonus = 0

    while True:
        dt = clock.tick_busy_loop(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit()
                return 0
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    pygame.quit()
                    return 0
                if e.key == pygame.K_r:
                    state = engine.new_game(seed)
                    bonus = 0
                    continue
                action = action_for_key(engine, e.key)
                if action:
                    state = action(state)

        if not state.over and not state.paused:
            keys = pygame.key.get_pressed()
            step = shift.update(dt, keys[pygame.K_LEFT], keys[pygame.K_RIGHT])
            if step < 0:
                state = engine.move_left(state)
            elif step > 0:
                state = engine.move_right(state)
            state = engine.tick(state, dt)

        if bonus_word and not bonus:
            bonus = daily_bonus(state.words_found, bonus_word)

        screen.blit(render.bg, (0, 0))
        render.draw_board(screen, state.board)
        if state.active is not None:
            render.draw_piece(screen, state.active, engine.ghost_row(state))
        render.draw_panel(screen, state, state.words_found[-8:])
        if state.over:
            render.draw_banner(screen, big_font, f"GAME OVER {state.score + bonus} (R)")
        elif state.paused:
            render.draw_banner(screen, big_font, "PAUSED (P)")
        pygame.display.flip()


if __name__ == "__main__":
    sys.exit(main())
