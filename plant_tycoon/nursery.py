"""
Holding area for harvested plants waiting to be sold.
"""


class Nursery:
    """Insertion-ordered entries, keyed by id."""

    def __init__(self):
        self._entries = {}

    def add(self, entry):
        if entry.id in self._entries:
            raise ValueError(f"Duplicate nursery id: {entry.id}")
        self._entries[entry.id] = entry
        return entry

    def find(self, entry_id):
        return self._entries.get(entry_id)

    def remove(self, entry_id):
        return self._entries.pop(entry_id, None)

    def entries(self):
        return list(self._entries.values())

    def total_value(self):
        return sum(e.value for e in self._entries.values())

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self.entries())

    def __contains__(self, entry_id):
        return entry_id in self._entries
