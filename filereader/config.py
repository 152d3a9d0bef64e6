"""
Global configuration dictionary and default parameters used across FileReader.

Stores the docs folder name, window geometry and logging level shared by
the interface and UI modules. Values are read once when the main window is
built.
"""

con_dict = {
    # folder scanned for documents, relative to the working directory
    "docs_folder": "docs",

    # main window
    "window_title": "File Reader",
    "window_width": 800,
    "window_height": 600,

    "log_level": "INFO",
}


def set_value(key, value):
    if key not in con_dict:
        raise KeyError(key)
    # naive cast
    ty = type(con_dict[key])
    con_dict[key] = ty(value)


def get_all():
    return con_dict
