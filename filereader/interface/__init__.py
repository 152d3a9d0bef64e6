"""
FileReader Interface Package
============================

The lightweight layer connecting view events to file operations.

It provides:

- ``EventDispatcher``
  Routes the two events a view raises to whichever handlers were
  registered for them:
      * window shown (one-shot)
      * list selection changed

- ``tools``
  Stateless functions that list the docs folder, read files line by line
  and push their contents onto a display surface.

Typical Usage
-------------
::

    disp = EventDispatcher(window)
    disp.set_shown(populate_list)
    disp.set_selection_changed(show_file)

"""

from .event_dispatcher import EventDispatcher

__all__ = ["EventDispatcher"]
