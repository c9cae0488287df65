import sys

from html5_tree.main import main

sys.exit(main())
