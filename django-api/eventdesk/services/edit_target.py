"""Edit target selection for the event modal."""

from eventdesk.domain import CREATE, Edit, EventRecord
from eventdesk.services.state import ClientState


class EditTargetSelector:
    """Decides whether the next modal submit creates or updates."""

    def __init__(self, state: ClientState) -> None:
        self._state = state

    def select_for_create(self) -> None:
        with self._state.lock:
            self._state.intent = CREATE
            self._state.modal_visible = True

    def select_for_edit(self, record: EventRecord) -> None:
        with self._state.lock:
            self._state.intent = Edit(record)
            self._state.modal_visible = True

    def clear(self) -> None:
        with self._state.lock:
            self._state.intent = CREATE
            self._state.modal_visible = False
