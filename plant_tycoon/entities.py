"""
Entities living in the garden and the nursery.
"""
import time
import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from .config import MAX_HEALTH


def clamp(value, low, high):
    return max(low, min(high, value))


class Plant:
    def __init__(self, species, planted_at, health=MAX_HEALTH):
        self.species = species
        self.planted_at = planted_at
        self.growth = 0  # 0..max_growth
        self.health = clamp(int(health), 0, MAX_HEALTH)
        self.is_mature = False

    def grow(self, step, max_growth):
        """Advance growth by one tick. Returns True on the tick that matures the plant."""
        if self.is_mature:
            return False
        self.growth = min(max_growth, self.growth + step)
        if self.growth >= max_growth:
            self.is_mature = True
            return True
        return False

    def set_health(self, health):
        self.health = clamp(int(health), 0, MAX_HEALTH)

    def snapshot(self):
        return PlantSnapshot(self.species, self.growth, self.health, self.is_mature)

    def __repr__(self):
        return f"Plant({self.species}, {self.growth}%)"


class PlotOccupancy:
    """
    What sits in an occupied plot: the plant plus the handle of its growth process.
    """
    def __init__(self, plant, growth_process=None):
        self.plant = plant
        self.growth_process = growth_process

    def cancel_growth(self):
        """Interrupt the growth process if it is still pending."""
        process = self.growth_process
        self.growth_process = None
        # Cleared from inside its own tick: the process notices on its own
        if process is None or process is process.env.active_process:
            return False
        if process.is_alive:
            process.interrupt("vacated")
            # A process that hasn't started yet can't catch the Interrupt
            process.defused = True
            return True
        return False


class Plot:
    def __init__(self, id):
        self.id = id
        self.occupancy: Optional[PlotOccupancy] = None

    @property
    def is_empty(self):
        return self.occupancy is None

    @property
    def plant(self):
        return None if self.occupancy is None else self.occupancy.plant

    def __repr__(self):
        return f"Plot_{self.id}"


def new_entry_id():
    """Unique nursery id: wall-clock millis plus a random hex part."""
    return f"plant-{int(time.time() * 1000)}-{uuid.uuid4().hex[:12]}"


@dataclass(frozen=True)
class NurseryEntry:
    species: str
    value: int
    id: str = field(default_factory=new_entry_id)


@dataclass(frozen=True)
class PlantSnapshot:
    species: str
    growth: int
    health: int
    is_mature: bool


@dataclass(frozen=True)
class PlotView:
    plot_id: int
    species: Optional[str] = None
    growth: int = 0
    is_mature: bool = False

    @property
    def is_empty(self):
        return self.species is None

    @property
    def label(self):
        if self.is_empty:
            return "Empty Plot"
        name = f"{self.species} (Mature)" if self.is_mature else self.species
        return f"{name} {self.growth}%"


@dataclass(frozen=True)
class GameView:
    time: float
    balance: int
    total_seeds: int
    plots: List[PlotView]
    nursery: List[NurseryEntry]

    @property
    def occupied_plots(self):
        return sum(1 for p in self.plots if not p.is_empty)
