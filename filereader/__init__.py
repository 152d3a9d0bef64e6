"""
FileReader application package.

A small Qt desktop viewer: it lists the files in the ``docs`` folder of the
working directory and shows the text of whichever one is selected.

Subpackages
-----------
- ui
    Qt widgets: the document page (file list + text pane), the info table
    and the busy-cursor helper.

- interface
    The EventDispatcher routing window events to handlers, and the tool
    functions that list the folder and read files.

- models
    FileReference and CurrentContext.

Other modules
-------------
- config
    Single in-memory configuration dictionary (con_dict) and helpers to
    read and mutate it.

- main
    Entry point defining MainWindow and the `main()` function to launch
    the GUI.

Typical usage
-------------
    python -m filereader.main
"""
