import sys

from restaurante_api.seeds.maestro import main

if __name__ == "__main__":
    sys.exit(main())
