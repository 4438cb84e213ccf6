"""Allow running Pixedit with ``python -m pixedit``."""

from pixedit.ui.app import main

if __name__ == "__main__":
    main()
