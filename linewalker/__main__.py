"""
Entry point for running the demo as a module: `python -m linewalker`
"""

from .demo import main

if __name__ == "__main__":
    main()
