"""``python -m pkgcache_cli`` runs the cleanpkgcache command."""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
