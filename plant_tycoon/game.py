"""
Game state and the intents that mutate it.
"""
import logging

import simpy

from .config import DEFAULT_SEED_TYPE, build_settings
from .economy import Economy
from .entities import GameView, NurseryEntry
from .garden import Garden
from .nursery import Nursery

logger = logging.getLogger(__name__)


class TycoonGame:
    """
    Owns the whole session: clock, economy, garden and nursery.

    Everything runs on one simpy Environment, so growth ticks and intents never
    overlap. Not thread-safe; threaded hosts must serialize calls.
    """
    def __init__(self, settings=None):
        self.settings = build_settings(settings)
        self.env = simpy.Environment()
        self.economy = Economy(self.settings["STARTING_BALANCE"], self.settings["SEED_COST"])
        self.garden = Garden(
            self.env,
            plot_count=self.settings["PLOT_COUNT"],
            growth_step=self.settings["GROWTH_STEP"],
            growth_interval=self.settings["GROWTH_INTERVAL_MS"],
            max_growth=self.settings["MAX_GROWTH"],
            base_values=self.settings["BASE_VALUE_BY_SPECIES"],
            default_base_value=self.settings["DEFAULT_BASE_VALUE"],
            strict_species=self.settings["STRICT_SPECIES"],
        )
        self.garden.listener = self._on_growth
        self.nursery = Nursery()
        self.adapters = []

    def log(self, message, *args):
        logger.info("[%.0fms] " + message, self.env.now, *args)

    # --- Adapters ---

    def attach(self, adapter):
        self.adapters.append(adapter)
        return adapter

    def detach(self, adapter):
        self.adapters.remove(adapter)

    def notify(self, event, detail=None):
        """Push a fresh view to every adapter. detail is what the intent produced, if anything."""
        if not self.adapters:
            return
        view = self.view()
        for adapter in list(self.adapters):
            adapter.on_state_changed(event, view, detail)

    def _report(self, result, event):
        if result.ok:
            if event:
                self.notify(event, result.value)
        else:
            self.log("Rejected: %s (%s)", result.error.value, result.message)
            for adapter in self.adapters:
                adapter.on_error(result)
        return result

    def _on_growth(self, event, plot):
        self.notify(event, plot.id)

    # --- Intents ---

    def buy_seed(self, seed_type=DEFAULT_SEED_TYPE):
        return self._report(self.economy.buy_seed(seed_type), "seed_bought")

    def plant_seed(self, plot_id, seed_type=DEFAULT_SEED_TYPE):
        return self._report(self.garden.plant(plot_id, seed_type, self.economy), "planted")

    def interact_with_plot(self, plot_id):
        result = self.garden.interact(plot_id, self.nursery)
        # Only a harvest mutates state; snapshots and empty plots are reads
        harvested = result.ok and isinstance(result.value, NurseryEntry)
        return self._report(result, "moved_to_nursery" if harvested else None)

    def move_to_nursery(self, plot_id):
        return self._report(self.garden.move_to_nursery(plot_id, self.nursery), "moved_to_nursery")

    def sell_nursery_entry(self, entry_id):
        return self._report(self.economy.sell_entry(self.nursery, entry_id), "sold")

    def vacate_plot(self, plot_id):
        return self._report(self.garden.vacate(plot_id), "vacated")

    def set_plant_health(self, plot_id, health):
        return self._report(self.garden.set_health(plot_id, health), "health_changed")

    # --- Clock ---

    def advance(self, duration):
        """Run the clock forward by duration ms, including events due exactly at the end."""
        if duration < 0:
            raise ValueError("Can't move the clock backwards")
        if duration > 0:
            self.env.run(until=self.env.now + duration)
        while self.env.peek() == self.env.now:
            self.env.step()

    def advance_ticks(self, ticks):
        self.advance(ticks * self.garden.growth_interval)

    def run(self, until):
        self.advance(until - self.env.now)

    # --- Queries ---

    @property
    def now(self):
        return self.env.now

    @property
    def balance(self):
        return self.economy.balance

    @property
    def total_seeds(self):
        return self.economy.total_seeds()

    def plot_views(self):
        return self.garden.plot_views()

    def nursery_views(self):
        return self.nursery.entries()

    def view(self):
        return GameView(
            time=self.env.now,
            balance=self.balance,
            total_seeds=self.total_seeds,
            plots=self.plot_views(),
            nursery=self.nursery_views(),
        )
