# -*- coding: utf-8 -*-
"""
Standalone launcher for the FileReader application.

Lets end-users start the GUI with:

    python FileReader.py

It performs no application logic itself and delegates to `main()` in the
`filereader` package. Run it from the directory that holds the ``docs``
folder.
"""

# FileReader.py
from filereader.main import main

if __name__ == "__main__":
    main()
