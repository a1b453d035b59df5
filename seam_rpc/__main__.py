import sys

from seam_rpc.cli import main

sys.exit(main())
