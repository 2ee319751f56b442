"""Entry point for the sticky note demo.

Run with: ``python src/main.py`` (or the ``stickynote`` console script).
"""
from stickynote.app import main

if __name__ == "__main__":
    main()
