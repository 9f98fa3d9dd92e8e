import sys

from fiction_engine.terminal import main

if __name__ == "__main__":
    sys.exit(main())
