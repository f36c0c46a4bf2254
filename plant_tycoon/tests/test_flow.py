import os
import tempfile
import unittest

import matplotlib
matplotlib.use("Agg")

from plant_tycoon.adapter import ERROR_MESSAGES, ConsoleAdapter, PresentationAdapter
from plant_tycoon.analytics import Analytics, SessionRecorder
from plant_tycoon.config import SCENARIO_A, SCENARIO_B
from plant_tycoon.game import TycoonGame
from plant_tycoon.results import ErrorKind
from plant_tycoon.session import greedy_strategy, idle_strategy, run_session


class RecordingAdapter(PresentationAdapter):
    def __init__(self):
        self.events = []
        self.errors = []

    def on_state_changed(self, event, view, detail=None):
        self.events.append((event, view))

    def on_error(self, result):
        self.errors.append(result.error)


class AutoHarvestAdapter(PresentationAdapter):
    """Moves a plant to the nursery the moment it matures."""
    def __init__(self, game):
        self.game = game
        self.harvested = []

    def on_state_changed(self, event, view, detail=None):
        if event == "matured":
            self.harvested.append(self.game.interact_with_plot(detail))


class WitherAdapter(PresentationAdapter):
    """Clears a plot once its plant reaches a growth threshold."""
    def __init__(self, game, threshold):
        self.game = game
        self.threshold = threshold
        self.vacated = []

    def on_state_changed(self, event, view, detail=None):
        if event == "grew" and view.plots[detail].growth >= self.threshold:
            self.vacated.append(self.game.vacate_plot(detail).value)


class TestGameFlow(unittest.TestCase):
    def test_full_cycle(self):
        """Buy, plant, grow, move to nursery, sell."""
        game = TycoonGame()
        self.assertEqual(game.balance, 100)

        game.buy_seed("common")
        self.assertEqual(game.balance, 90)
        self.assertEqual(game.total_seeds, 1)

        game.plant_seed(0, "common")
        self.assertEqual(game.total_seeds, 0)
        self.assertEqual(game.plot_views()[0].growth, 0)

        game.advance_ticks(10)
        plot0 = game.plot_views()[0]
        self.assertEqual(plot0.growth, 100)
        self.assertTrue(plot0.is_mature)
        self.assertEqual(plot0.label, "common (Mature) 100%")

        entry = game.interact_with_plot(0).value
        self.assertTrue(game.plot_views()[0].is_empty)
        self.assertEqual([(e.species, e.value) for e in game.nursery_views()], [("common", 30)])

        game.sell_nursery_entry(entry.id)
        self.assertEqual(game.balance, 120)
        self.assertEqual(game.nursery_views(), [])

    def test_adapter_notifications(self):
        game = TycoonGame({"PLOT_COUNT": 2})
        adapter = game.attach(RecordingAdapter())

        game.buy_seed()
        game.plant_seed(0)
        game.advance_ticks(10)
        game.interact_with_plot(0)
        game.interact_with_plot(1)  # empty, no notification
        events = [e for e, _ in adapter.events]

        self.assertEqual(events[:2], ["seed_bought", "planted"])
        self.assertEqual(events.count("grew"), 9)
        self.assertEqual(events[-2:], ["matured", "moved_to_nursery"])

        view = adapter.events[-1][1]
        self.assertEqual(view.balance, 90)
        self.assertEqual(len(view.nursery), 1)
        self.assertEqual([p.label for p in view.plots], ["Empty Plot", "Empty Plot"])

    def test_adapter_gets_errors(self):
        game = TycoonGame({"STARTING_BALANCE": 5})
        adapter = game.attach(RecordingAdapter())

        self.assertFalse(game.buy_seed())
        self.assertFalse(game.plant_seed(0))
        self.assertFalse(game.sell_nursery_entry("plant-0-missing"))
        self.assertEqual(adapter.errors, [
            ErrorKind.INSUFFICIENT_FUNDS,
            ErrorKind.NO_SEED_AVAILABLE,
            ErrorKind.NOT_FOUND,
        ])
        self.assertEqual(adapter.events, [])

    def test_console_adapter(self):
        lines = []
        game = TycoonGame({"PLOT_COUNT": 2})
        game.attach(ConsoleAdapter(out=lines.append))
        game.buy_seed()
        game.plant_seed(1)
        game.advance_ticks(10)

        self.assertIn("Money 90 | Seeds 0", lines[-2])
        self.assertEqual(lines[-1], "  Empty Plot | common (Mature) 100%")

        game.sell_nursery_entry("nope")
        self.assertEqual(lines[-1], "Nothing there.")
        broke = TycoonGame({"STARTING_BALANCE": 5})
        broke.attach(ConsoleAdapter(out=lines.append))
        broke.buy_seed()
        self.assertEqual(lines[-1], "Not enough money!")
        broke.plant_seed(0)
        self.assertEqual(lines[-1], ERROR_MESSAGES[ErrorKind.NO_SEED_AVAILABLE])

    def test_unknown_setting(self):
        with self.assertRaises(KeyError):
            TycoonGame({"PLOTS": 3})

    def test_advance_rejects_negative(self):
        with self.assertRaises(ValueError):
            TycoonGame().advance(-1)


class TestIntentsFromNotifications(unittest.TestCase):
    def test_harvest_on_matured(self):
        game = TycoonGame()
        adapter = game.attach(AutoHarvestAdapter(game))
        game.buy_seed()
        game.plant_seed(0)

        game.advance_ticks(10)
        self.assertEqual(len(adapter.harvested), 1)
        self.assertTrue(adapter.harvested[0].ok)
        self.assertTrue(game.garden.get_plot(0).is_empty)
        self.assertEqual([e.value for e in game.nursery_views()], [30])

        game.advance_ticks(5)
        self.assertTrue(game.garden.get_plot(0).is_empty)

        # The plot is usable again
        game.buy_seed()
        game.plant_seed(0)
        game.advance_ticks(10)
        self.assertEqual(len(game.nursery), 2)

    def test_vacate_from_growth_tick(self):
        game = TycoonGame()
        adapter = game.attach(WitherAdapter(game, threshold=30))
        game.buy_seed()
        game.plant_seed(0)

        game.advance_ticks(10)
        self.assertEqual(len(adapter.vacated), 1)
        withered = adapter.vacated[0]
        self.assertEqual(withered.growth, 30)
        self.assertFalse(withered.is_mature)
        self.assertTrue(game.garden.get_plot(0).is_empty)
        self.assertEqual(len(game.nursery), 0)

        game.detach(adapter)
        game.buy_seed()
        game.plant_seed(0)
        game.advance_ticks(10)
        self.assertTrue(game.garden.get_plot(0).plant.is_mature)

    def test_rejection_logged_once(self):
        game = TycoonGame({"STARTING_BALANCE": 5})
        with self.assertLogs("plant_tycoon", level="INFO") as logs:
            game.buy_seed()
        self.assertEqual(len(logs.records), 1)
        self.assertIn("insufficient_funds", logs.output[0])


class TestSession(unittest.TestCase):
    def test_greedy_harvests_sells_and_replants_in_one_step(self):
        game = TycoonGame({"PLOT_COUNT": 1})
        game.buy_seed()
        game.plant_seed(0)
        game.advance_ticks(10)

        for intent, args in greedy_strategy(game):
            getattr(game, intent)(*args)
        self.assertEqual(len(game.nursery), 0)
        self.assertEqual(game.balance, 90 + 30 - 10)
        self.assertFalse(game.garden.get_plot(0).is_empty)

    def test_recorder_attached_mid_game(self):
        game = TycoonGame()
        game.buy_seed()
        game.plant_seed(0)
        game.advance_ticks(10)
        entry = game.move_to_nursery(0).value

        recorder = game.attach(SessionRecorder())
        game.sell_nursery_entry(entry.id)
        self.assertEqual(list(recorder.to_frame()["sale_value"]), [30])

        stats = Analytics().add_result("late", game, recorder)
        self.assertEqual(stats["plants_sold"], 1)
        self.assertEqual(stats["avg_sale_value"], 30.0)

    def test_greedy_session_makes_profit(self):
        game, recorder = run_session(SCENARIO_A, greedy_strategy, duration=120000)

        self.assertEqual(game.now, 120000)
        self.assertGreater(game.balance, 100)
        df = recorder.to_frame()
        self.assertGreater((df["event"] == "sold").sum(), 0)
        self.assertTrue((df["balance"] >= 0).all())

    def test_idle_session(self):
        game, recorder = run_session(SCENARIO_A, idle_strategy, duration=10000)
        self.assertEqual(game.balance, 100)
        self.assertEqual(len(recorder.to_frame()), 0)

    def test_analytics(self):
        analytics = Analytics()
        for scenario in (SCENARIO_A, SCENARIO_B):
            game, recorder = run_session(scenario, greedy_strategy, duration=60000)
            analytics.add_result(scenario["NAME"], game, recorder)

        stats = analytics.results[SCENARIO_A["NAME"]]
        self.assertEqual(stats["avg_sale_value"], 30.0)
        self.assertEqual(stats["profit"], stats["final_balance"] - 100)
        self.assertGreaterEqual(stats["peak_balance"], stats["final_balance"])

        with tempfile.TemporaryDirectory() as tmp:
            analytics.generate_graphs(tmp)
            self.assertTrue(os.path.exists(os.path.join(tmp, "balance_over_time.png")))
            self.assertTrue(os.path.exists(os.path.join(tmp, "plants_sold.png")))


if __name__ == '__main__':
    unittest.main()
