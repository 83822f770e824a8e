import sys

from restaurant_ordering.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
