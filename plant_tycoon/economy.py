"""
Currency balance and seed inventory.
"""
import logging

from .config import DEFAULT_SEED_TYPE, SEED_COST, STARTING_BALANCE
from .results import ErrorKind, Result

logger = logging.getLogger(__name__)


class Economy:
    def __init__(self, balance=STARTING_BALANCE, seed_cost=SEED_COST):
        if balance < 0:
            raise ValueError("Starting balance can't be negative")
        self.balance = balance
        self.seed_cost = seed_cost
        self.seed_inventory = {DEFAULT_SEED_TYPE: 0}

    def total_seeds(self):
        return sum(self.seed_inventory.values())

    def seeds_of(self, seed_type):
        return self.seed_inventory.get(seed_type, 0)

    def buy_seed(self, seed_type=DEFAULT_SEED_TYPE):
        if self.balance < self.seed_cost:
            return Result.failure(
                ErrorKind.INSUFFICIENT_FUNDS,
                f"Balance {self.balance} is below the seed cost {self.seed_cost}"
            )

        self.balance -= self.seed_cost
        self.seed_inventory[seed_type] = self.seeds_of(seed_type) + 1
        logger.info("Bought a %s seed. Balance: %d", seed_type, self.balance)
        return Result.success(seed_type)

    def take_seed(self, seed_type):
        """Consume one seed for planting. False if none is left."""
        if self.seeds_of(seed_type) <= 0:
            return False
        self.seed_inventory[seed_type] -= 1
        return True

    def credit(self, amount):
        if amount < 0:
            raise ValueError(f"Can't credit a negative amount: {amount}")
        self.balance += amount

    def sell_entry(self, nursery, entry_id):
        """Sell a nursery entry by id and add its value to the balance."""
        entry = nursery.remove(entry_id)
        if entry is None:
            return Result.failure(ErrorKind.NOT_FOUND, f"No plant with id {entry_id} in the nursery")

        self.credit(entry.value)
        logger.info("Sold %s for %d. Balance: %d", entry.species, entry.value, self.balance)
        return Result.success(entry)
