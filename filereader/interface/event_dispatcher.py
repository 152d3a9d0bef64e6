"""
Routes window-shown and selection-changed events to registered handlers.
"""


class EventDispatcher:
    """
   Lightweight router for view events.

   Accepts any view object that exposes ``on_shown`` and
   ``on_selection_changed`` hook attributes. It does not depend on Qt or
   the concrete window class.

   The shown handler is one-shot: it runs on the first shown event only.
   """
    def __init__(self, view):
        self.view = view
        self._shown = None
        self._selection = None
        self._shown_fired = False

        # bind shims
        self.view.on_shown = self._shim_shown
        self.view.on_selection_changed = self._shim_selection

    # setters
    def set_shown(self, func):
        self._shown = func
    def set_selection_changed(self, func):
        self._selection = func

    @property
    def shown_fired(self) -> bool:
        return self._shown_fired

    # clear all for teardown methods
    def clear(self):
        self._shown = None
        self._selection = None

    def _shim_shown(self):
        if self._shown_fired:
            return
        self._shown_fired = True
        f = self._shown
        if callable(f): f()
    def _shim_selection(self, file_ref):
        f = self._selection
        if callable(f): f(file_ref)
