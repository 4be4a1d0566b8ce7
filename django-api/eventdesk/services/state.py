"""Mutable state shared by the controllers of one client."""

import threading
from dataclasses import dataclass, field

from eventdesk.domain import CREATE, Edit, EditIntent, EventRecord, ReadModel, Session


@dataclass
class ClientState:
    """Session, event collection and edit target of one client.

    Controllers mutate fields only while holding ``lock``.
    """

    session: Session = field(default_factory=Session)
    events: list[EventRecord] = field(default_factory=list)
    intent: EditIntent = CREATE
    modal_visible: bool = False
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    def read_model(self) -> ReadModel:
        with self.lock:
            target = self.intent.record if isinstance(self.intent, Edit) else None
            form = {
                "name": target.name if target else "",
                "description": target.description if target else "",
            }
            return ReadModel(
                is_authenticated=self.session.is_authenticated,
                events=tuple(self.events),
                edit_target=target,
                modal_visible=self.modal_visible,
                form=form,
            )
