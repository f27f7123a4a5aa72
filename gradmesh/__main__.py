import sys

from gradmesh._cli import main

sys.exit(main())
