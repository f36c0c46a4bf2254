"""
Headless scripted sessions: a player process issuing intents on a fixed cadence.
"""
from .analytics import SessionRecorder
from .config import DECISION_INTERVAL_MS, DEFAULT_SEED_TYPE, SESSION_TIME
from .game import TycoonGame

# ==========================================
# STRATEGIES
# ==========================================
# A strategy looks at the game and returns (or yields) (intent, args) decisions.


def idle_strategy(game):
    return []


def greedy_strategy(game):
    """Harvest everything, sell everything, keep every plot planted.

    Decisions are yielded one at a time, so each sees the previous one applied:
    plants harvested here are sold and their plots replanted in the same step.
    """
    for pid in game.garden.mature_plot_ids():
        yield ("interact_with_plot", (pid,))
    for entry in game.nursery_views():
        yield ("sell_nursery_entry", (entry.id,))
    for pid in game.garden.empty_plot_ids():
        if game.economy.seeds_of(DEFAULT_SEED_TYPE) == 0:
            if game.balance < game.economy.seed_cost:
                return
            yield ("buy_seed", (DEFAULT_SEED_TYPE,))
        yield ("plant_seed", (pid, DEFAULT_SEED_TYPE))


def player_process(game, strategy, interval=DECISION_INTERVAL_MS):
    while True:
        for intent, args in strategy(game):
            getattr(game, intent)(*args)
        yield game.env.timeout(interval)


def run_session(settings=None, strategy=greedy_strategy, duration=SESSION_TIME,
                interval=DECISION_INTERVAL_MS, adapters=()):
    """Play one game for duration ms. Returns (game, recorder)."""
    game = TycoonGame(settings)
    recorder = game.attach(SessionRecorder())
    for adapter in adapters:
        game.attach(adapter)
    game.env.process(player_process(game, strategy, interval))
    game.run(duration)
    return game, recorder
