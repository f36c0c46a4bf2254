"""
Garden plots and the growth process of the plants in them.
"""
import logging
import operator

import simpy

from .config import (
    PLOT_COUNT, GROWTH_STEP, GROWTH_INTERVAL_MS, MAX_GROWTH,
    BASE_VALUE_BY_SPECIES, DEFAULT_BASE_VALUE, STRICT_SPECIES
)
from .entities import Plot, Plant, PlotOccupancy, NurseryEntry, PlotView
from .results import ErrorKind, Result

logger = logging.getLogger(__name__)


class Garden:
    """
    Fixed set of plots, each Empty or holding one plant.
    States per plot: EMPTY -> GROWING -> MATURE -> EMPTY (moved to nursery)
    """
    def __init__(self, env, plot_count=PLOT_COUNT, growth_step=GROWTH_STEP,
                 growth_interval=GROWTH_INTERVAL_MS, max_growth=MAX_GROWTH,
                 base_values=None, default_base_value=DEFAULT_BASE_VALUE,
                 strict_species=STRICT_SPECIES):
        if plot_count < 0:
            raise ValueError("plot_count can't be negative")
        if growth_step <= 0 or growth_interval <= 0 or max_growth <= 0:
            raise ValueError("growth_step, growth_interval and max_growth must be positive")

        self.env = env
        self.plots = [Plot(i) for i in range(plot_count)]
        self.growth_step = growth_step
        self.growth_interval = growth_interval
        self.max_growth = max_growth
        self.base_values = dict(BASE_VALUE_BY_SPECIES if base_values is None else base_values)
        self.default_base_value = default_base_value
        self.strict_species = strict_species

        # Called as listener(event, plot) after every growth tick
        self.listener = None

    def get_plot(self, plot_id):
        if isinstance(plot_id, bool):
            return None
        try:
            index = operator.index(plot_id)
        except TypeError:
            return None
        if 0 <= index < len(self.plots):
            return self.plots[index]
        return None

    def _missing_plot(self, plot_id):
        return Result.failure(ErrorKind.NOT_FOUND, f"No plot with id {plot_id}")

    # --- Transitions ---

    def plant(self, plot_id, seed_type, economy):
        plot = self.get_plot(plot_id)
        if plot is None:
            return self._missing_plot(plot_id)
        if not plot.is_empty:
            return Result.failure(ErrorKind.NO_SEED_AVAILABLE, f"Plot {plot_id} is already planted")
        if not economy.take_seed(seed_type):
            return Result.failure(ErrorKind.NO_SEED_AVAILABLE, f"No {seed_type} seeds in inventory")

        plant = Plant(seed_type, self.env.now)
        occupancy = PlotOccupancy(plant)
        plot.occupancy = occupancy
        occupancy.growth_process = self.env.process(self.growth_process(plot, plant))
        logger.info("%s seed planted in plot %s", seed_type, plot_id)
        return Result.success(plant)

    def growth_process(self, plot, plant):
        """One tick every growth_interval until the plant matures or the plot is vacated."""
        try:
            while not plant.is_mature:
                yield self.env.timeout(self.growth_interval)
                matured = plant.grow(self.growth_step, self.max_growth)
                if matured:
                    logger.info("Plant in plot %s is mature.", plot.id)
                else:
                    logger.debug("Plant in plot %s grew to %d%%", plot.id, plant.growth)
                if self.listener is not None:
                    self.listener("matured" if matured else "grew", plot)
                # A listener may have harvested or vacated the plot
                if plot.plant is not plant:
                    break
        except simpy.Interrupt as interrupt:
            logger.debug("Growth in plot %s cancelled (%s)", plot.id, interrupt.cause)

    def interact(self, plot_id, nursery):
        """Harvest a mature plant, or return a snapshot of an immature one."""
        plot = self.get_plot(plot_id)
        if plot is None:
            return self._missing_plot(plot_id)
        if plot.is_empty:
            return Result.success(None)

        plant = plot.plant
        if plant.is_mature:
            return self.move_to_nursery(plot_id, nursery)

        logger.info("Interacting with plant: %s, Growth: %d%%", plant.species, plant.growth)
        return Result.success(plant.snapshot())

    def move_to_nursery(self, plot_id, nursery):
        plot = self.get_plot(plot_id)
        if plot is None:
            return self._missing_plot(plot_id)
        plant = plot.plant
        if plant is None or not plant.is_mature:
            return Result.failure(ErrorKind.NOT_MATURE, f"Plot {plot_id} has no mature plant")
        if self.strict_species and plant.species not in self.base_values:
            return Result.failure(ErrorKind.UNKNOWN_SPECIES, f"Unknown species: {plant.species}")

        value = self.calculate_value(plant)
        self._clear(plot)
        entry = nursery.add(NurseryEntry(plant.species, value))
        logger.info("%s moved to nursery. Value: %d", plant.species, value)
        return Result.success(entry)

    def vacate(self, plot_id):
        """Clear a plot regardless of maturity; pending growth ticks are cancelled."""
        plot = self.get_plot(plot_id)
        if plot is None:
            return self._missing_plot(plot_id)
        if plot.is_empty:
            return Result.failure(ErrorKind.NOT_FOUND, f"Plot {plot_id} is empty")
        plant = plot.plant
        self._clear(plot)
        logger.info("Plot %s vacated (%s at %d%%)", plot_id, plant.species, plant.growth)
        return Result.success(plant)

    def set_health(self, plot_id, health):
        plot = self.get_plot(plot_id)
        if plot is None or plot.is_empty:
            return Result.failure(ErrorKind.NOT_FOUND, f"No plant in plot {plot_id}")
        plot.plant.set_health(health)
        return Result.success(plot.plant.snapshot())

    def _clear(self, plot):
        plot.occupancy.cancel_growth()
        plot.occupancy = None

    # --- Value ---

    def base_value(self, species):
        if species in self.base_values:
            return self.base_values[species]
        logger.warning("Unknown species %r, using default base value %d",
                       species, self.default_base_value)
        return self.default_base_value

    def calculate_value(self, plant):
        return self.base_value(plant.species) + plant.health // 10

    # --- Queries ---

    def plot_views(self):
        views = []
        for plot in self.plots:
            plant = plot.plant
            if plant is None:
                views.append(PlotView(plot.id))
            else:
                views.append(PlotView(plot.id, plant.species, plant.growth, plant.is_mature))
        return views

    def occupied_count(self):
        return sum(1 for p in self.plots if not p.is_empty)

    def mature_plot_ids(self):
        return [p.id for p in self.plots if p.plant is not None and p.plant.is_mature]

    def empty_plot_ids(self):
        return [p.id for p in self.plots if p.is_empty]
