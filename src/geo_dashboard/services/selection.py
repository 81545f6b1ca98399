"""Selection coordinator - the one selected record shared by list and map."""

import solara


class SelectionCoordinator:
    """Holds at most one selected record id.

    Pure state: ids are not checked against the current page.
    """

    def __init__(self):
        self.selected_id: solara.Reactive[str | None] = solara.reactive(None)

    def select(self, record_id: str) -> None:
        self.selected_id.value = record_id

    def clear(self) -> None:
        self.selected_id.value = None

    def is_selected(self, record_id: str) -> bool:
        return self.selected_id.value == record_id
