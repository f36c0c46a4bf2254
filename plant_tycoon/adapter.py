"""
Presentation layer boundary.

The core never draws anything. Adapters attached to a TycoonGame get a
GameView after every state change and the Result of every rejected intent.
Turning a rejection into something a player reads is the adapter's job;
Result.message is only a diagnostic for logs.
"""
from .results import ErrorKind

ERROR_MESSAGES = {
    ErrorKind.INSUFFICIENT_FUNDS: "Not enough money!",
    ErrorKind.NO_SEED_AVAILABLE: "You can't plant there! Buy seeds from the shop or pick an empty plot.",
    ErrorKind.NOT_MATURE: "That plant isn't ready yet.",
    ErrorKind.NOT_FOUND: "Nothing there.",
    ErrorKind.UNKNOWN_SPECIES: "Nobody wants to buy that plant.",
}


class PresentationAdapter:
    """Base adapter; override the hooks you care about.

    on_state_changed gets the event name, a GameView and a detail: the
    plot id for growth events, otherwise whatever the intent produced
    (the sold NurseryEntry for "sold", the planted Plant for "planted", ...).
    Adapters may forward intents back into the game from these hooks.
    """

    def on_state_changed(self, event, view, detail=None):
        pass

    def on_error(self, result):
        pass


class ConsoleAdapter(PresentationAdapter):
    """
    Text rendering of the game, printed on every change.
    """
    def __init__(self, show_ticks=False, out=print):
        self.show_ticks = show_ticks
        self.out = out

    def on_state_changed(self, event, view, detail=None):
        if event == "grew" and not self.show_ticks:
            return
        self.out(f"[{view.time / 1000:.1f}s] {event}: Money {view.balance} | Seeds {view.total_seeds}")
        self.out("  " + " | ".join(p.label for p in view.plots))
        if view.nursery:
            self.out("  Nursery: " + ", ".join(f"{e.species} (Value: {e.value})" for e in view.nursery))

    def on_error(self, result):
        self.out(ERROR_MESSAGES[result.error])
